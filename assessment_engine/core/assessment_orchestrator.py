"""
Assessment Orchestrator for the assessment engine

The public surface of the engine:
- Question generation (line-tagged and online JSON variants)
- Answer evaluation and criteria-based assessment
- Follow-up questions
- Response analysis
- Overall session feedback
- Live interviewer suggestions

Every operation runs Build -> Invoke -> Parse -> Validate, and swaps in a
fallback result when the completion service or its output fails. The one
exception is generate_questions, which raises QuestionGenerationError when
the completion service is unavailable.
"""

import logging

from assessment_engine.core.completion_client import CompletionClient
from assessment_engine.core.errors import (
    CompletionError,
    QuestionGenerationError,
    ResponseParseError,
)
from assessment_engine.core.fallbacks import (
    fallback_analysis,
    fallback_assessment,
    fallback_evaluation,
    fallback_overall_feedback,
    fallback_questions,
    fallback_suggestions,
    keyword_match_percent,
)
from assessment_engine.core.response_parser import (
    decode_json,
    parse_evaluation,
    parse_followup_questions,
    parse_question_blocks,
)
from assessment_engine.models.evaluation import (
    AnswerAssessment,
    EvaluationResult,
    ResponseAnalysis,
)
from assessment_engine.models.feedback import (
    CandidateProfile,
    InterviewerSuggestion,
    OverallFeedback,
    QuestionRecord,
)
from assessment_engine.models.question import (
    Difficulty,
    ExperienceLevel,
    GenerationOptions,
    OnlineQuestionPayload,
    Question,
    QuestionType,
    RequestedQuestionType,
)
from assessment_engine.prompts.evaluator import EvaluatorPrompts
from assessment_engine.prompts.interviewer import InterviewerPrompts
from assessment_engine.prompts.report import ReportPrompts

logger = logging.getLogger(__name__)

DEFAULT_CRITERIA = ["technical_accuracy", "communication"]


class AssessmentOrchestrator:
    """
    Central AI assessment component.

    Holds only the injected completion client and model identifier, so a
    single instance can serve any number of concurrent calls.

    Temperature by task:
    - 0.2-0.4: scoring, analysis and feedback (consistency)
    - 0.5-0.7: question and follow-up generation (variety)
    """

    def __init__(self, completion_client: CompletionClient, model: str | None = None):
        """
        Initialize the orchestrator.

        Args:
            completion_client: Client used for every outbound completion
            model: Model identifier sent with each request (client default if None)
        """
        self.completion_client = completion_client
        self.model = model

        self.interviewer_prompts = InterviewerPrompts()
        self.evaluator_prompts = EvaluatorPrompts()
        self.report_prompts = ReportPrompts()

    async def _invoke(
        self,
        system_role: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Call the completion client, normalising any failure to CompletionError."""
        try:
            return await self.completion_client.complete(
                system_role,
                prompt,
                temperature,
                max_tokens,
                model=self.model,
            )
        except CompletionError:
            raise
        except Exception as e:
            raise CompletionError(f"Completion client failed: {e}") from e

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_questions(self, options: GenerationOptions) -> list[Question]:
        """
        Generate interview questions from skills and resume content.

        Args:
            options: Generation configuration

        Returns:
            Up to options.question_count questions

        Raises:
            QuestionGenerationError: If the completion service fails. No
                generic question set stands in for a caller's chosen skills here.
        """
        prompt = self.interviewer_prompts.generate_question_prompt(options)

        try:
            response = await self._invoke(
                InterviewerPrompts.QUESTION_SYSTEM_ROLE,
                prompt,
                temperature=0.7,
                max_tokens=2000,
            )
        except CompletionError as e:
            logger.error(f"Question generation failed: {e}")
            raise QuestionGenerationError("Failed to generate interview questions") from e

        blocks = parse_question_blocks(response)
        if not blocks:
            logger.warning("No question blocks found in completion, using fallback questions")
            return fallback_questions(options.skills, options.difficulty, options.question_count)

        questions = [
            self._build_question(block, options, position)
            for position, block in enumerate(blocks[:options.question_count], 1)
        ]
        logger.info(f"Generated {len(questions)} questions for skills: {', '.join(options.skills) or 'general'}")
        return questions

    def _build_question(self, block: dict, options: GenerationOptions, position: int) -> Question:
        """Turn a parsed Q/Expected/Criteria block into a Question."""
        text = block["text"]
        mentioned = [skill for skill in options.skills if skill.lower() in text.lower()]

        if options.question_type == RequestedQuestionType.BEHAVIORAL:
            question_type = QuestionType.BEHAVIORAL
        elif (
            options.question_type == RequestedQuestionType.MIXED
            and block.get("type", "").strip().lower().startswith("behavio")
        ):
            question_type = QuestionType.BEHAVIORAL
        else:
            question_type = QuestionType.TECHNICAL

        time_limit = max(1.0, round(options.duration_minutes / options.question_count, 1))

        return Question(
            id=f"q{position}",
            text=text,
            type=question_type,
            skill=mentioned[0] if mentioned else "general",
            difficulty_score=options.difficulty.score,
            expected_keywords=mentioned,
            time_limit_minutes=time_limit,
            assessment_criteria=block["criteria"],
            expected_answer=block["expected"],
        )

    async def generate_online_interview_questions(
        self,
        skills: list[str],
        difficulty: Difficulty = Difficulty.INTERMEDIATE,
        count: int = 10,
        experience: ExperienceLevel = ExperienceLevel.FRESHER,
        duration_minutes: int = 30,
    ) -> list[Question]:
        """
        Generate a structured question set for an online AI-driven interview.

        Never raises: service or parse failures return fallback questions.

        Returns:
            At most ``count`` questions
        """
        difficulty = Difficulty(difficulty)
        experience = ExperienceLevel(experience)
        if count < 1:
            return []

        prompt = self.interviewer_prompts.generate_online_question_prompt(
            skills, difficulty, count, experience, duration_minutes
        )

        try:
            response = await self._invoke(
                InterviewerPrompts.ONLINE_QUESTION_SYSTEM_ROLE,
                prompt,
                temperature=0.6,
                max_tokens=3000,
            )
            payloads = decode_json(response, list[OnlineQuestionPayload])
        except (CompletionError, ResponseParseError) as e:
            logger.error(f"Online question generation failed, using fallback: {e}")
            return fallback_questions(skills, difficulty, count)

        if not payloads:
            logger.warning("Completion returned an empty question list, using fallback")
            return fallback_questions(skills, difficulty, count)

        questions = [
            payload.to_question(position)
            for position, payload in enumerate(payloads[:count], 1)
        ]
        logger.info(f"Generated {len(questions)} online interview questions")
        return questions

    # =========================================================================
    # ANSWER EVALUATION
    # =========================================================================

    async def evaluate_answer(
        self,
        question: str,
        answer: str,
        expected_answer: str | None = None,
    ) -> EvaluationResult:
        """
        Score a candidate's answer.

        Args:
            question: The question that was asked
            answer: Candidate's answer text
            expected_answer: Outline of a good answer, if known

        Returns:
            EvaluationResult with every score in [0, 10]
        """
        prompt = self.evaluator_prompts.generate_evaluation_prompt(question, answer, expected_answer)

        try:
            response = await self._invoke(
                EvaluatorPrompts.EVALUATION_SYSTEM_ROLE,
                prompt,
                temperature=0.3,
                max_tokens=1000,
            )
        except CompletionError as e:
            logger.error(f"Evaluation failed, using fallback: {e}")
            return fallback_evaluation()

        evaluation = parse_evaluation(response)
        logger.info(f"Evaluation complete: score={evaluation.overall_score:.1f}")
        return evaluation

    async def assess_answer(
        self,
        question: str,
        answer: str,
        assessment_criteria: list[str] | None = None,
        expected_keywords: list[str] | None = None,
    ) -> AnswerAssessment:
        """
        Assess an online interview answer against named criteria.

        When the model does not report a keyword match, it is computed
        from expected_keywords (50 when none are given).

        Returns:
            AnswerAssessment with keyword_match_percent in [0, 100]
        """
        criteria = list(assessment_criteria) if assessment_criteria else list(DEFAULT_CRITERIA)
        prompt = self.evaluator_prompts.generate_assessment_prompt(question, answer, criteria)

        try:
            response = await self._invoke(
                EvaluatorPrompts.ASSESSMENT_SYSTEM_ROLE,
                prompt,
                temperature=0.3,
                max_tokens=1000,
            )
            assessment = decode_json(response, AnswerAssessment)
        except (CompletionError, ResponseParseError) as e:
            logger.error(f"Answer assessment failed, using fallback: {e}")
            return fallback_assessment(criteria, answer, expected_keywords)

        if "keyword_match_percent" not in assessment.model_fields_set and expected_keywords:
            assessment = assessment.model_copy(
                update={"keyword_match_percent": keyword_match_percent(answer, expected_keywords)}
            )

        logger.info(
            f"Assessment complete: score={assessment.overall_score:.1f}, "
            f"keyword_match={assessment.keyword_match_percent}%"
        )
        return assessment

    async def generate_follow_up(self, original_question: str, candidate_answer: str) -> list[str]:
        """
        Generate follow-up questions for an answer.

        Returns:
            Follow-up questions, empty when generation fails
        """
        prompt = self.interviewer_prompts.generate_followup_prompt(original_question, candidate_answer)

        try:
            response = await self._invoke(
                InterviewerPrompts.FOLLOWUP_SYSTEM_ROLE,
                prompt,
                temperature=0.6,
                max_tokens=300,
            )
        except CompletionError as e:
            logger.error(f"Follow-up generation failed: {e}")
            return []

        return parse_followup_questions(response)

    async def analyze_response(self, answer: str) -> ResponseAnalysis:
        """Analyze sentiment, confidence and clarity of an answer."""
        prompt = self.evaluator_prompts.generate_analysis_prompt(answer)

        try:
            response = await self._invoke(
                EvaluatorPrompts.ANALYSIS_SYSTEM_ROLE,
                prompt,
                temperature=0.2,
                max_tokens=500,
            )
            return decode_json(response, ResponseAnalysis)
        except (CompletionError, ResponseParseError) as e:
            logger.error(f"Response analysis failed, using fallback: {e}")
            return fallback_analysis()

    # =========================================================================
    # SESSION FEEDBACK
    # =========================================================================

    async def generate_overall_feedback(
        self,
        records: list[QuestionRecord],
        skills: list[str],
        candidate_name: str | None = None,
    ) -> OverallFeedback:
        """
        Generate whole-session feedback and a hiring recommendation.

        Args:
            records: Every question with its answer and evaluation
            skills: Candidate's skills
            candidate_name: Name used in the prompt

        Returns:
            OverallFeedback with at most three strengths and improvements
        """
        prompt = self.report_prompts.generate_overall_feedback_prompt(records, skills, candidate_name)

        try:
            response = await self._invoke(
                ReportPrompts.FEEDBACK_SYSTEM_ROLE,
                prompt,
                temperature=0.4,
                max_tokens=1500,
            )
            feedback = decode_json(response, OverallFeedback)
        except (CompletionError, ResponseParseError) as e:
            logger.error(f"Overall feedback generation failed, using fallback: {e}")
            return fallback_overall_feedback()

        logger.info(f"Overall feedback complete: recommendation={feedback.recommendation.value}")
        return feedback

    async def generate_interviewer_suggestions(
        self,
        profile: CandidateProfile,
        current_question: str,
        answers_so_far: int,
        elapsed_minutes: float | None = None,
    ) -> InterviewerSuggestion:
        """
        Suggest next steps to an interviewer running a live session.

        Args:
            profile: What is known about the candidate
            current_question: Question currently being discussed
            answers_so_far: Number of answers the candidate has given
            elapsed_minutes: Time since the interview started, if known
        """
        prompt = self.interviewer_prompts.generate_suggestion_prompt(
            profile, current_question, answers_so_far, elapsed_minutes
        )

        try:
            response = await self._invoke(
                InterviewerPrompts.SUGGESTION_SYSTEM_ROLE,
                prompt,
                temperature=0.5,
                max_tokens=800,
            )
            return decode_json(response, InterviewerSuggestion)
        except (CompletionError, ResponseParseError) as e:
            logger.error(f"Interviewer suggestions failed, using fallback: {e}")
            return fallback_suggestions()
