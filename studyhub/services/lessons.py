"""Static lesson catalogue served by GET /lessons."""

LESSONS = {
    "firstSemester": [
        "Ethics",
        "Logic and Critical Thinking",
        "Academic Writing",
        "Introduction to Psychology",
        "General Mathematics",
    ],
    "secondSemester": [
        "Philosophy of Science",
        "Research Methods",
        "Statistics",
        "Communication Skills",
        "Civic Education",
    ],
}


def get_lessons() -> dict[str, list[str]]:
    return {semester: list(names) for semester, names in LESSONS.items()}
