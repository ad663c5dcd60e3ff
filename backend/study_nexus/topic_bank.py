"""Curated topic and resource catalogue with generic fallbacks."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from .models import Difficulty, SessionResource

CURATED_TOPICS: Dict[str, Dict[str, List[str]]] = {
    "mathematics": {
        "beginner": ["Basic Algebra", "Geometry Fundamentals", "Introduction to Statistics"],
        "intermediate": ["Calculus I", "Linear Algebra", "Probability Theory"],
        "advanced": ["Multivariable Calculus", "Differential Equations", "Abstract Algebra"],
    },
    "physics": {
        "beginner": ["Classical Mechanics", "Thermodynamics Basics", "Introduction to Waves"],
        "intermediate": ["Electromagnetism", "Quantum Mechanics", "Relativity"],
        "advanced": ["Quantum Field Theory", "Particle Physics", "General Relativity"],
    },
    "chemistry": {
        "beginner": ["Atomic Structure", "Chemical Bonding", "Introduction to Organic Chemistry"],
        "intermediate": ["Chemical Kinetics", "Thermodynamics", "Organic Reactions"],
        "advanced": ["Quantum Chemistry", "Biochemistry", "Inorganic Complexes"],
    },
    "biology": {
        "beginner": ["Cell Biology", "Genetics Basics", "Introduction to Evolution"],
        "intermediate": ["Molecular Biology", "Physiology", "Ecology"],
        "advanced": ["Bioinformatics", "Genomics", "Advanced Genetics"],
    },
    "computer science": {
        "beginner": ["Programming Fundamentals", "Data Structures", "Algorithms Basics"],
        "intermediate": ["Object-Oriented Programming", "Database Systems", "Software Engineering"],
        "advanced": ["Machine Learning", "Computer Graphics", "Distributed Systems"],
    },
    "operating systems": {
        "beginner": ["Introduction to OS", "Process Management", "Memory Management Basics"],
        "intermediate": ["Process Scheduling", "File Systems", "I/O Systems"],
        "advanced": ["Distributed Systems", "Virtualization", "Security in OS"],
    },
}

SESSION_RESOURCES: Dict[str, List[SessionResource]] = {
    "mathematics": [
        SessionResource(type="video", title="Khan Academy - Algebra Basics"),
        SessionResource(type="article", title="MIT OpenCourseWare - Calculus"),
        SessionResource(type="practice", title="Brilliant - Math Problems"),
    ],
    "physics": [
        SessionResource(type="video", title="Crash Course Physics"),
        SessionResource(type="simulation", title="PhET Interactive Simulations"),
        SessionResource(type="article", title="Physics Classroom - Tutorials"),
    ],
    "chemistry": [
        SessionResource(type="video", title="Crash Course Chemistry"),
        SessionResource(type="simulation", title="ChemCollective Virtual Labs"),
        SessionResource(type="article", title="ChemGuide - Concepts"),
    ],
    "biology": [
        SessionResource(type="video", title="Crash Course Biology"),
        SessionResource(type="simulation", title="BioInteractive Virtual Labs"),
        SessionResource(type="article", title="Biology Corner - Lessons"),
    ],
    "computer science": [
        SessionResource(type="video", title="Harvard CS50"),
        SessionResource(type="interactive", title="Codecademy - Interactive Coding"),
        SessionResource(type="article", title="GeeksforGeeks - Algorithms"),
    ],
    "operating systems": [
        SessionResource(type="video", title="Operating Systems - Crash Course"),
        SessionResource(type="book", title="Operating System Concepts by Silberschatz"),
        SessionResource(type="simulation", title="OS Simulations - Interactive Learning"),
    ],
}

GENERIC_TOPIC_TEMPLATES = (
    "Introduction to {subject}",
    "Core Concepts of {subject}",
    "Advanced {subject} Principles",
    "Practice Problems for {subject}",
)


def _capitalize_words(subject: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in subject.split())


def generic_topics(subject: str) -> List[str]:
    formatted = _capitalize_words(subject)
    return [template.format(subject=formatted) for template in GENERIC_TOPIC_TEMPLATES]


def build_topics(
    subject: str,
    difficulty: Difficulty,
    file_topics: Optional[Sequence[str]] = None,
) -> List[str]:
    """Resolve the ordered topic list for a subject.

    Extracted file topics replace the catalogue outright; otherwise the curated list for
    ``(subject.lower(), difficulty)`` is used, and unknown subjects get four generic topics.
    """
    if file_topics:
        return list(file_topics)
    curated = CURATED_TOPICS.get(subject.lower(), {}).get(difficulty)
    if curated:
        return list(curated)
    return generic_topics(subject)


def build_topic_bank(
    subjects: Sequence[str],
    difficulty: Difficulty,
    subject_file_topics: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, List[str]]:
    file_topics = subject_file_topics or {}
    return {subject: build_topics(subject, difficulty, file_topics.get(subject)) for subject in subjects}


def resources_for(subject: str) -> List[SessionResource]:
    return [resource.model_copy() for resource in SESSION_RESOURCES.get(subject.lower(), [])]


__all__ = [
    "CURATED_TOPICS",
    "GENERIC_TOPIC_TEMPLATES",
    "SESSION_RESOURCES",
    "build_topic_bank",
    "build_topics",
    "generic_topics",
    "resources_for",
]
