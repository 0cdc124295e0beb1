from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from engine.cards import resolve_rng, shuffle
from engine.models import Option, Question, QuizCategory
from scenarios import MIX_CATEGORIES, generate_question

LOGGER = logging.getLogger("quiz")


@dataclass
class QuizConfig:
    question_count: int = 10
    mix_per_category: int = 2


@dataclass(frozen=True)
class AnswerDetail:
    question: Question
    selected_option: Optional[Option]
    correct_option: Option

    @property
    def is_correct(self) -> bool:
        return self.selected_option is not None and self.selected_option.is_correct


@dataclass(frozen=True)
class QuizResults:
    correct_count: int
    total: int
    details: Tuple[AnswerDetail, ...] = ()

    @property
    def percentage(self) -> int:
        if not self.total:
            return 0
        return round(self.correct_count / self.total * 100)


def generate_questions(
    category: QuizCategory,
    config: Optional[QuizConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    config = config or QuizConfig()
    if config.question_count < 1 or config.mix_per_category < 1:
        raise ValueError("A quiz needs at least one question")
    rng = resolve_rng(rng)
    if category is QuizCategory.RANDOM_MIX:
        mixed = [
            generate_question(each, rng)
            for each in MIX_CATEGORIES
            for _ in range(config.mix_per_category)
        ]
        return shuffle(mixed, rng)
    return [generate_question(category, rng) for _ in range(config.question_count)]


class QuizSession:
    """One quiz run held in memory: the questions, where we are, and what was answered."""

    def __init__(self, config: Optional[QuizConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or QuizConfig()
        self.rng = resolve_rng(rng)
        self.category: Optional[QuizCategory] = None
        self.questions: List[Question] = []
        self.current_index = 0
        self.answers: Dict[str, str] = {}
        self.showing_explanation = False
        self.completed = False

    # Quiz lifecycle --------------------------------------------------

    def start_quiz(self, category: QuizCategory) -> Question:
        # Generate first so a failure leaves the previous run untouched.
        questions = generate_questions(category, self.config, self.rng)
        self.category = category
        self.questions = questions
        self.current_index = 0
        self.answers = {}
        self.showing_explanation = False
        self.completed = False
        LOGGER.info("Started %s quiz with %d questions", category.value, len(questions))
        return questions[0]

    def current_question(self) -> Optional[Question]:
        if self.completed or self.current_index >= len(self.questions):
            return None
        return self.questions[self.current_index]

    def select_answer(self, option_id: str) -> bool:
        question = self.current_question()
        if question is None:
            raise RuntimeError("No active question")
        if self.showing_explanation:
            raise RuntimeError("Answer already recorded for this question")
        option = question.option(option_id)
        if option is None:
            raise ValueError(f"Unknown option: {option_id}")

        self.answers[question.id] = option_id
        self.showing_explanation = True
        return option.is_correct

    def next_question(self) -> Optional[Question]:
        if not self.questions:
            raise RuntimeError("Quiz not started")
        next_index = self.current_index + 1
        self.showing_explanation = False
        if next_index >= len(self.questions):
            if not self.completed:
                self.completed = True
                results = self.results()
                LOGGER.info("Quiz complete: %d/%d correct", results.correct_count, results.total)
            return None
        self.current_index = next_index
        return self.questions[next_index]

    # Reporting -------------------------------------------------------

    def results(self) -> QuizResults:
        details = []
        for question in self.questions:
            selected_id = self.answers.get(question.id)
            selected = question.option(selected_id) if selected_id is not None else None
            details.append(AnswerDetail(question, selected, question.correct_option))
        correct = sum(1 for detail in details if detail.is_correct)
        return QuizResults(correct_count=correct, total=len(self.questions), details=tuple(details))
