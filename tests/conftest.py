"""Shared fixtures for the coflowcode tests."""

from __future__ import annotations

import copy
import json
from datetime import datetime, timezone

import pytest

from coflowcode.items import Assignment

ASSIGNMENT_DOC = {
    "id": 7,
    "title": "Python Basics: Lists & Loops",
    "description": "Warm-up exercises",
    "estimatedTime": 45,
    "notes": "Reuse for section B",
    "items": [
        {"id": 1, "type": "text", "content": "# Welcome"},
        {
            "id": 2,
            "type": "multiple-choice",
            "question": "Which are mutable?",
            "choices": ["list", "tuple", "dict", "str"],
            "correctAnswers": [0, 2],
            "shuffle": False,
            "choiceFeedback": ["Yes", "Tuples are immutable", "Yes", "Strings are immutable"],
        },
        {
            "id": 3,
            "type": "fill-in-blank",
            "question": "Keyword to define a function?",
            "acceptedAnswers": ["def"],
            "caseSensitive": True,
        },
        {"id": 4, "type": "page-break", "requireAllCorrect": True},
        {
            "id": 5,
            "type": "essay",
            "prompt": "Explain list comprehensions.",
            "gradingConfig": {
                "rubric": {
                    "title": "Essay rubric",
                    "description": "Clarity and accuracy",
                    "criteria": [
                        {"level": 1, "name": "Clarity", "description": "Clear", "points": 3},
                        {"level": 2, "name": "Accuracy", "description": "Correct", "points": 7},
                    ],
                },
                "aiPrompt": "Grade: {{question}} / {{studentAnswer}}",
            },
        },
        {
            "id": 6,
            "type": "code-cell",
            "prompt": "Write sum_list.",
            "files": [
                {"name": "main.py", "language": "python", "content": "def sum_list(xs):\n    pass\n", "isInstructorFile": False},
                {"name": "test_main.py", "language": "python", "content": "assert sum_list([1]) == 1\n", "isInstructorFile": True},
            ],
            "gradingConfig": {"testFileName": "test_main.py"},
        },
    ],
}

SUBMISSION_DOC = {
    "assignmentId": 7,
    "assignmentTitle": "Python Basics: Lists & Loops",
    "assignmentDescription": "Warm-up exercises",
    "assignmentEstimatedTime": 45,
    "timestamp": "2024-03-01T10:00:00+00:00",
    "currentPage": 1,
    "totalPages": 2,
    "collaborators": [
        {"name": "Ada", "email": "ada@example.edu", "role": "driver"},
        {"name": "Lin", "email": "lin@example.edu"},
    ],
    "answers": [
        {"itemId": 2, "mcqAnswer": [2, 0]},
        {"itemId": 3, "fillInBlankAnswer": "def"},
        {"itemId": 5, "essayAnswer": "They build lists."},
        {
            "itemId": 6,
            "codeFiles": [
                {"name": "main.py", "language": "python", "content": "def sum_list(xs): return sum(xs)", "isInstructorFile": False}
            ],
        },
    ],
    "submittedResults": [
        {
            "itemId": 2,
            "mcqResult": {
                "passed": True,
                "selectedAnswers": [2, 0],
                "correctAnswers": [0, 2],
                "feedbackPerChoice": ["Yes", "No", "Yes", "No"],
            },
        },
        {
            "itemId": 3,
            "fillInBlankResult": {"passed": True, "studentAnswer": "def", "acceptedAnswers": ["def"]},
        },
    ],
    "attemptHistory": {
        "0": [
            {
                "attemptNumber": 1,
                "timestamp": "2024-03-01T09:55:00+00:00",
                "results": [
                    {
                        "itemId": 3,
                        "fillInBlankResult": {"passed": False, "studentAnswer": "Def", "acceptedAnswers": ["def"]},
                    }
                ],
            }
        ]
    },
    "pendingGradingItems": [5],
}


@pytest.fixture
def assignment_doc():
    return copy.deepcopy(ASSIGNMENT_DOC)


@pytest.fixture
def submission_doc():
    return copy.deepcopy(SUBMISSION_DOC)


@pytest.fixture
def assignment(assignment_doc):
    return Assignment.from_dict(assignment_doc)


@pytest.fixture
def assignment_file(tmp_path, assignment_doc):
    path = tmp_path / "assignment.json"
    path.write_text(json.dumps(assignment_doc, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


