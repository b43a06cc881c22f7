"""
AI Evaluator Prompt Templates

Contains structured prompts for evaluating candidate responses.

Evaluation dimensions:
- Technical Accuracy
- Communication
- Problem Solving
- Confidence
"""


class EvaluatorPrompts:
    """
    Prompt templates for AI evaluation of responses.

    Key principles:
    - Objective, rubric-based scoring
    - Identify both strengths and gaps
    - Provide actionable feedback
    """

    EVALUATION_SYSTEM_ROLE = (
        "You are an expert interviewer evaluating candidate responses. "
        "Provide fair, constructive feedback with scores."
    )
    ASSESSMENT_SYSTEM_ROLE = "You are an expert interview assessor providing detailed feedback."
    ANALYSIS_SYSTEM_ROLE = "You are an expert in communication analysis. Return only valid JSON."

    SCORING_RUBRIC = """
=== SCORING RUBRIC (0-10 scale) ===
- 9-10: Completely accurate, well-structured, covers edge cases
- 7-8: Mostly accurate, minor omissions, fundamentally sound
- 5-6: Partially correct, shows basic understanding
- 3-4: Significant errors or very superficial
- 0-2: Mostly incorrect or no real answer
"""

    def generate_evaluation_prompt(
        self,
        question: str,
        answer: str,
        expected_answer: str | None = None,
    ) -> str:
        """Generate prompt for line-tagged answer evaluation."""

        expected = f"Expected Answer: {expected_answer}\n" if expected_answer else ""

        return f"""Evaluate this interview response:
{self.SCORING_RUBRIC}
Question: {question}
{expected}Candidate's Answer: {answer}

Provide evaluation in this format:
Score: [0-10]
Technical Accuracy: [0-10]
Communication: [0-10]
Problem Solving: [0-10]
Confidence: [0-10]
Strengths: [strength one; strength two]
Improvements: [improvement one; improvement two]

Feedback: [Detailed constructive feedback]
"""

    def generate_assessment_prompt(
        self,
        question: str,
        answer: str,
        criteria: list[str],
    ) -> str:
        """Generate prompt for criteria-based JSON assessment."""

        criteria_text = ", ".join(criteria) if criteria else "technical_accuracy, communication"

        return f"""Assess this interview answer on a scale of 1-10 for each criterion:

Question: {question}
Candidate's Answer: {answer}
Assessment Criteria: {criteria_text}

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
  "overallScore": 1-10,
  "criteriaScores": {{
    "technical_accuracy": 1-10,
    "completeness": 1-10,
    "communication": 1-10,
    "problem_solving": 1-10
  }},
  "strengths": ["strength1", "strength2"],
  "improvements": ["area1", "area2"],
  "feedback": "detailed feedback text",
  "keywordMatch": 0-100
}}
"""

    def generate_analysis_prompt(self, answer: str) -> str:
        """Generate prompt for sentiment and clarity analysis."""

        return f"""Analyze the following interview response and provide sentiment, confidence level, and clarity score.

Response: {answer}

Format your response as JSON:
{{
  "sentiment": "positive|neutral|negative",
  "confidence_level": "high|medium|low",
  "clarity_score": 1-10,
  "keywords": ["keyword1", "keyword2"],
  "communication_quality": "excellent|good|fair|poor"
}}
"""
