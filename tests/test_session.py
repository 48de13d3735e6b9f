"""Tests for the in-memory taking session and bundle export."""

import json

import pytest

from coflowcode.errors import PageLockedError
from coflowcode.items import CodeFile
from coflowcode.storage import export_submission_json
from coflowcode.submissions import Collaborator, TakingSession
from coflowcode.validation import parse_submission, validate_submission


@pytest.fixture
def session(assignment, fixed_clock):
    return TakingSession(
        assignment,
        collaborators=[Collaborator(name="Ada", email="ada@example.edu")],
        clock=fixed_clock,
    )


class TestAnswers:
    def test_mcq_selection_toggles(self, session):
        session.set_mcq_choice(2, 0, True)
        session.set_mcq_choice(2, 2, True)
        session.set_mcq_choice(2, 2, True)
        assert session.set_mcq_choice(2, 0, False) == [2]

    def test_choice_out_of_range(self, session):
        with pytest.raises(IndexError):
            session.set_mcq_choice(2, 9, True)

    def test_wrong_item_type(self, session):
        with pytest.raises(TypeError):
            session.set_fill_in_blank_answer(2, "x")

    def test_unknown_item(self, session):
        with pytest.raises(KeyError):
            session.set_essay_answer(99, "x")

    def test_instructor_files_dropped(self, session):
        session.set_code_files(
            6,
            [
                CodeFile(name="main.py", language="python", content="x = 1"),
                CodeFile(name="secret.py", language="python", content="", is_instructor_file=True),
            ],
        )
        assert [f.name for f in session.get_answer(6).code_files] == ["main.py"]

    def test_answers_in_assignment_order(self, session):
        session.set_essay_answer(5, "text")
        session.set_fill_in_blank_answer(3, "def")
        assert [a.item_id for a in session.answers] == [3, 5]


class TestSubmit:
    def test_submit_grades_current_page(self, session):
        session.set_mcq_choice(2, 2, True)
        session.set_mcq_choice(2, 0, True)
        session.set_fill_in_blank_answer(3, "Def")

        attempt = session.submit_page()

        assert attempt.attempt_number == 1
        assert attempt.timestamp == "2024-03-01T12:00:00+00:00"
        assert [r.item_id for r in attempt.results] == [2, 3]
        assert session.get_result(2).passed
        assert not session.get_result(3).passed
        assert not session.page_passed(0)

    def test_resubmit_replaces_results(self, session):
        session.set_fill_in_blank_answer(3, "Def")
        session.submit_page()
        session.set_fill_in_blank_answer(3, "def")
        session.set_mcq_choice(2, 0, True)
        session.set_mcq_choice(2, 2, True)
        attempt = session.submit_page()

        assert attempt.attempt_number == 2
        assert len(session.submitted_results) == 2
        assert session.page_passed(0)
        assert len(session.attempt_history["0"]) == 2

    def test_manual_items_pending(self, session):
        session.set_mcq_choice(2, 0, True)
        session.set_mcq_choice(2, 2, True)
        session.set_fill_in_blank_answer(3, "def")
        session.submit_page()
        assert session.pending_grading_items == set()

        session.next_page()
        attempt = session.submit_page()
        assert attempt.results == []
        assert session.pending_grading_items == {5}


class TestNavigation:
    def test_gate_blocks_until_correct(self, session):
        assert not session.can_advance()
        with pytest.raises(PageLockedError):
            session.next_page()

        session.set_mcq_choice(2, 0, True)
        session.set_mcq_choice(2, 2, True)
        session.set_fill_in_blank_answer(3, "def")
        session.submit_page()

        assert session.next_page() == 1
        assert session.current_items[0].id == 5

    def test_last_page_stays(self, session):
        session.current_page = 1
        assert session.next_page() == 1
        assert session.previous_page() == 0
        assert session.previous_page() == 0


class TestBundle:
    def test_bundle_round_trips(self, session):
        session.set_mcq_choice(2, 1, True)
        session.set_essay_answer(5, "An essay")
        session.submit_page()

        bundle = session.to_bundle()
        assert bundle.total_pages == 2
        assert bundle.assignment_estimated_time == 45
        assert bundle.collaborators[0].email == "ada@example.edu"

        text = export_submission_json(bundle)
        assert validate_submission(json.loads(text))
        assert parse_submission(text) == bundle

    def test_bundle_is_snapshot(self, session):
        session.set_fill_in_blank_answer(3, "def")
        bundle = session.to_bundle()
        session.set_fill_in_blank_answer(3, "changed")
        assert bundle.get_answer(3).fill_in_blank_answer == "def"
