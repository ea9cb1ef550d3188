import logging
from openai import OpenAI

from lib.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a journaling assistant that summarizes reflections."


class SummaryService:
    def __init__(self, openai_client: OpenAI, model: str = "gpt-4"):
        self.client = openai_client
        self.model = model
        logger.info(f"Summary service initialized with model: {model}")

    def build_prompt(self, transcript: str) -> str:
        """Build the summarization prompt around the raw transcript"""
        # TODO: escape quotes in the transcript before it reaches the prompt
        return (
            "Summarize the following reflection. "
            "Extract energy level (low/medium/high) and list 3 gratitude points:\n"
            f'"{transcript}"'
        )

    async def summarize(self, transcript: str) -> str:
        """Summarize a reflection, falling back to the error sentinel on any failure"""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": self.build_prompt(transcript)}
                ]
            )

            if not response.choices or not response.choices[0].message.content:
                raise ValueError("No summary returned from OpenAI")

            summary = response.choices[0].message.content
            logger.info(f"Generated summary: {summary[:50]}...")
            return summary

        except Exception as e:
            return ErrorHandler.handle_summary_error(e)
