import random
from collections import Counter

import pytest

from engine.models import QuizCategory
from quiz import QuizConfig, QuizSession, generate_questions
from quiz.__main__ import main
from scenarios import GenerationExhaustedError


def _session(count=3, seed=11):
    return QuizSession(QuizConfig(question_count=count), rng=random.Random(seed))


def test_full_quiz_run_scores_answers():
    session = _session()
    question = session.start_quiz(QuizCategory.PREFLOP_ACTION)
    answered_correctly = 0
    wrong_once = False
    while question is not None:
        if not wrong_once:
            wrong = next(option for option in question.options if not option.is_correct)
            assert session.select_answer(wrong.id) is False
            wrong_once = True
        else:
            assert session.select_answer(question.correct_option.id) is True
            answered_correctly += 1
        question = session.next_question()

    assert session.completed
    assert session.current_question() is None
    results = session.results()
    assert results.total == 3
    assert results.correct_count == answered_correctly == 2
    assert results.percentage == 67
    assert [detail.is_correct for detail in results.details] == [False, True, True]
    assert isinstance(results.details, tuple)


def test_unanswered_questions_count_as_wrong():
    session = _session(count=2)
    session.start_quiz(QuizCategory.HAND_RANKING)
    session.next_question()
    session.next_question()
    results = session.results()
    assert results.correct_count == 0
    assert all(detail.selected_option is None for detail in results.details)


def test_answer_twice_is_rejected():
    session = _session()
    question = session.start_quiz(QuizCategory.FOLD_CALL_RAISE)
    session.select_answer(question.options[0].id)
    with pytest.raises(RuntimeError, match="already recorded"):
        session.select_answer(question.options[1].id)


def test_unknown_option_is_rejected():
    session = _session()
    session.start_quiz(QuizCategory.FOLD_CALL_RAISE)
    with pytest.raises(ValueError, match="Unknown option"):
        session.select_answer("nope")


def test_session_misuse_before_start():
    session = _session()
    with pytest.raises(RuntimeError, match="No active question"):
        session.select_answer("opt_0")
    with pytest.raises(RuntimeError, match="Quiz not started"):
        session.next_question()


def test_random_mix_takes_each_category_evenly():
    questions = generate_questions(QuizCategory.RANDOM_MIX, QuizConfig(mix_per_category=2), random.Random(3))
    assert len(questions) == 12
    counts = Counter(question.category for question in questions)
    assert set(counts.values()) == {2}
    assert QuizCategory.RANDOM_MIX not in counts


def test_generate_questions_rejects_empty_quiz():
    with pytest.raises(ValueError, match="at least one question"):
        generate_questions(QuizCategory.HAND_RANKING, QuizConfig(question_count=0))


def test_failed_start_keeps_previous_quiz(monkeypatch):
    session = _session()
    first = session.start_quiz(QuizCategory.PREFLOP_ACTION)
    session.select_answer(first.correct_option.id)

    def exhausted(category, rng=None):
        raise GenerationExhaustedError(category, 50)

    monkeypatch.setattr("quiz.session.generate_question", exhausted)
    with pytest.raises(GenerationExhaustedError):
        session.start_quiz(QuizCategory.NUTS_READING)

    assert session.category is QuizCategory.PREFLOP_ACTION
    assert session.current_question() == first
    assert session.answers == {first.id: first.correct_option.id}


def test_restart_resets_progress():
    session = _session(count=2)
    question = session.start_quiz(QuizCategory.PREFLOP_ACTION)
    session.select_answer(question.correct_option.id)
    session.next_question()
    session.start_quiz(QuizCategory.PREFLOP_ACTION)
    assert session.current_index == 0
    assert session.answers == {}
    assert not session.completed


def test_terminal_quiz_runs_to_completion(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    assert main(["--category", "preflopAction", "--count", "2", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "QUESTION 1/2" in out
    assert "RESULTS" in out


def test_terminal_quiz_reports_generation_failure(monkeypatch, capsys):
    def exhausted(category, rng=None):
        raise GenerationExhaustedError(category, 50)

    monkeypatch.setattr("quiz.session.generate_question", exhausted)
    assert main(["--category", "handRanking"]) == 1
    assert "Failed to generate questions" in capsys.readouterr().out
