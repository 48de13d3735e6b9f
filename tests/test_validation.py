"""Tests for assignment and submission schema validation and parsing."""

import json

import pytest

from coflowcode.errors import ImportValidationError, InvalidSchemaError, MalformedJSONError
from coflowcode.items import Assignment, PageBreakItem
from coflowcode.submissions import SubmissionBundle
from coflowcode.validation import (
    load_assignment_file,
    load_submission_file,
    parse_assignment,
    parse_submission,
    validate_assignment,
    validate_submission,
)


class TestValidateAssignment:
    def test_valid_document(self, assignment_doc):
        assert validate_assignment(assignment_doc)

    def test_minimal_document(self):
        assert validate_assignment({"id": 1, "title": "x", "items": []})

    def test_page_break_with_only_id_and_type(self):
        assert validate_assignment(
            {"id": 1, "title": "x", "items": [{"id": 2, "type": "page-break"}]}
        )

    @pytest.mark.parametrize("value", [None, [], "text", 3, True])
    def test_non_object_rejected(self, value):
        assert not validate_assignment(value)

    def test_missing_id(self, assignment_doc):
        del assignment_doc["id"]
        assert not validate_assignment(assignment_doc)

    def test_string_id(self, assignment_doc):
        assignment_doc["id"] = "7"
        assert not validate_assignment(assignment_doc)

    def test_boolean_id(self, assignment_doc):
        assignment_doc["id"] = True
        assert not validate_assignment(assignment_doc)

    def test_items_not_array(self, assignment_doc):
        assignment_doc["items"] = {"0": {"id": 1, "type": "text", "content": ""}}
        assert not validate_assignment(assignment_doc)

    def test_unknown_item_type(self, assignment_doc):
        assignment_doc["items"].append({"id": 99, "type": "unknown-type"})
        assert not validate_assignment(assignment_doc)

    def test_mcq_missing_correct_answers(self, assignment_doc):
        del assignment_doc["items"][1]["correctAnswers"]
        assert not validate_assignment(assignment_doc)

    def test_mcq_non_string_choice(self, assignment_doc):
        assignment_doc["items"][1]["choices"][0] = 1
        assert not validate_assignment(assignment_doc)

    def test_code_file_missing_instructor_flag(self, assignment_doc):
        del assignment_doc["items"][5]["files"][0]["isInstructorFile"]
        assert not validate_assignment(assignment_doc)

    def test_code_file_not_object(self, assignment_doc):
        assignment_doc["items"][5]["files"].append(None)
        assert not validate_assignment(assignment_doc)

    def test_later_malformed_item_rejected(self, assignment_doc):
        assignment_doc["items"].append({"id": 10, "type": "essay"})
        assert not validate_assignment(assignment_doc)

    @pytest.mark.parametrize(
        "field, value",
        [("description", 5), ("notes", ["a"]), ("estimatedTime", "45"), ("estimatedTime", None)],
    )
    def test_wrong_typed_optional_field(self, assignment_doc, field, value):
        assignment_doc[field] = value
        assert not validate_assignment(assignment_doc)

    def test_absent_optional_fields(self, assignment_doc):
        for field in ("description", "notes", "estimatedTime"):
            del assignment_doc[field]
        assert validate_assignment(assignment_doc)

    def test_unknown_fields_tolerated(self, assignment_doc):
        assignment_doc["theme"] = "dark"
        assignment_doc["items"][0]["collapsed"] = True
        assert validate_assignment(assignment_doc)

    def test_invalid_grading_config(self, assignment_doc):
        assignment_doc["items"][4]["gradingConfig"]["enableAnswerCheck"] = "yes"
        assert not validate_assignment(assignment_doc)

    def test_invalid_rubric_criteria(self, assignment_doc):
        criteria = assignment_doc["items"][4]["gradingConfig"]["rubric"]["criteria"]
        criteria[0]["points"] = "3"
        assert not validate_assignment(assignment_doc)

    @pytest.mark.parametrize(
        "item",
        [
            {"id": 1, "type": "text"},
            {"id": 1, "type": "essay", "prompt": None},
            {"id": 1, "type": "fill-in-blank", "question": "q", "acceptedAnswers": "a"},
            {"id": 1, "type": "fill-in-blank", "question": "q", "acceptedAnswers": [], "caseSensitive": "no"},
            {"id": 1, "type": "code-cell", "prompt": "p"},
            {"id": "1", "type": "page-break"},
            {"type": "page-break"},
            {"id": 1, "type": 3},
        ],
    )
    def test_malformed_items(self, item):
        assert not validate_assignment({"id": 1, "title": "x", "items": [item]})


class TestValidateSubmission:
    def test_valid_bundle(self, submission_doc):
        assert validate_submission(submission_doc)

    @pytest.mark.parametrize(
        "field",
        [
            "assignmentId",
            "assignmentTitle",
            "timestamp",
            "currentPage",
            "totalPages",
            "collaborators",
            "answers",
            "submittedResults",
            "attemptHistory",
            "pendingGradingItems",
        ],
    )
    def test_missing_required_field(self, submission_doc, field):
        del submission_doc[field]
        assert not validate_submission(submission_doc)

    def test_attempt_history_must_be_mapping(self, submission_doc):
        submission_doc["attemptHistory"] = []
        assert not validate_submission(submission_doc)

    def test_wrong_typed_optional_fields(self, submission_doc):
        submission_doc["assignmentEstimatedTime"] = "45"
        assert not validate_submission(submission_doc)

    def test_optional_fields_absent(self, submission_doc):
        del submission_doc["assignmentDescription"]
        del submission_doc["assignmentEstimatedTime"]
        assert validate_submission(submission_doc)

    def test_collaborator_without_email(self, submission_doc):
        del submission_doc["collaborators"][1]["email"]
        assert not validate_submission(submission_doc)

    def test_answer_with_string_indices(self, submission_doc):
        submission_doc["answers"][0]["mcqAnswer"] = ["0"]
        assert not validate_submission(submission_doc)

    def test_answer_code_file_incomplete(self, submission_doc):
        del submission_doc["answers"][3]["codeFiles"][0]["language"]
        assert not validate_submission(submission_doc)

    def test_mcq_result_requires_all_fields(self, submission_doc):
        del submission_doc["submittedResults"][0]["mcqResult"]["feedbackPerChoice"]
        assert not validate_submission(submission_doc)

    def test_fill_in_blank_result_type(self, submission_doc):
        submission_doc["submittedResults"][1]["fillInBlankResult"]["passed"] = "true"
        assert not validate_submission(submission_doc)

    def test_result_without_grading_payload(self, submission_doc):
        submission_doc["submittedResults"].append({"itemId": 5})
        assert validate_submission(submission_doc)

    def test_attempt_page_value_not_array(self, submission_doc):
        submission_doc["attemptHistory"]["1"] = {"attemptNumber": 1}
        assert not validate_submission(submission_doc)

    def test_attempt_missing_timestamp(self, submission_doc):
        del submission_doc["attemptHistory"]["0"][0]["timestamp"]
        assert not validate_submission(submission_doc)

    def test_attempt_result_checked(self, submission_doc):
        results = submission_doc["attemptHistory"]["0"][0]["results"]
        results[0]["fillInBlankResult"]["acceptedAnswers"] = [1]
        assert not validate_submission(submission_doc)

    def test_pending_items_must_be_numbers(self, submission_doc):
        submission_doc["pendingGradingItems"] = [5, "6"]
        assert not validate_submission(submission_doc)

    def test_empty_bundle(self):
        assert validate_submission(
            {
                "assignmentId": 1,
                "assignmentTitle": "x",
                "timestamp": "2024-01-01T00:00:00Z",
                "currentPage": 0,
                "totalPages": 1,
                "collaborators": [],
                "answers": [],
                "submittedResults": [],
                "attemptHistory": {},
                "pendingGradingItems": [],
            }
        )


class TestParse:
    def test_parse_assignment(self, assignment_doc):
        assignment = parse_assignment(json.dumps(assignment_doc))
        assert isinstance(assignment, Assignment)
        assert assignment.title == "Python Basics: Lists & Loops"
        assert [item.id for item in assignment.items] == [1, 2, 3, 4, 5, 6]
        assert isinstance(assignment.items[3], PageBreakItem)

    def test_malformed_json(self):
        with pytest.raises(MalformedJSONError, match="^Invalid JSON: "):
            parse_assignment("{not json")

    def test_invalid_schema_message(self):
        with pytest.raises(InvalidSchemaError) as exc_info:
            parse_assignment('{"id": "1", "title": "x", "items": []}')
        assert str(exc_info.value) == (
            "Invalid assignment schema: The file does not contain a valid assignment structure."
        )

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_submission("[]")
        with pytest.raises(ImportValidationError):
            parse_submission("")

    def test_parse_submission(self, submission_doc):
        bundle = parse_submission(json.dumps(submission_doc))
        assert isinstance(bundle, SubmissionBundle)
        assert bundle.pending_grading_items == [5]
        assert bundle.attempts_for_page(0)[0].results[0].passed is False
        assert bundle.get_answer(2).mcq_answer == [2, 0]
        assert bundle.collaborators[0].role == "driver"

    def test_invalid_submission_message(self):
        with pytest.raises(InvalidSchemaError, match="valid submission bundle structure"):
            parse_submission('{"assignmentId": 1}')

    def test_load_files(self, tmp_path, assignment_file, submission_doc):
        assert load_assignment_file(assignment_file).id == 7
        path = tmp_path / "submission.json"
        path.write_text(json.dumps(submission_doc), encoding="utf-8")
        assert load_submission_file(path).assignment_id == 7

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_assignment_file(tmp_path / "missing.json")
