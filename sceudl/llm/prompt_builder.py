# File: sceudl/llm/prompt_builder.py
"""
Prompt building module for study-plan generation.
"""

import json
from typing import Dict, List, Sequence

from sceudl.core.config_manager import Config
from sceudl.utils.logger import setup_logger

logger = setup_logger(__name__)


class PromptBuilder:
    """Builds the schedule-generation prompt from class times and goals."""

    def __init__(
        self,
        days: Sequence[str] = tuple(Config.STUDY_DAYS),
        time_slots: Sequence[str] = tuple(Config.STUDY_TIME_SLOTS)
    ):
        self.days = list(days)
        self.time_slots = list(time_slots)

    def schema(self) -> Dict[str, Dict[str, str]]:
        """Empty weekday -> slot -> task mapping the model must fill in."""
        return {day: {slot: "" for slot in self.time_slots} for day in self.days}

    def build_schedule_prompt(
        self,
        class_times: List[str],
        study_goals: str,
        intensity: int = Config.DEFAULT_INTENSITY
    ) -> str:
        """
        Build the prompt for one weekly study plan.

        Args:
            class_times: Class-time lines, one per class
            study_goals: Free-text goals
            intensity: 1 (light), 2 (moderate) or 3 (heavy)

        Returns:
            Prompt string
        """
        intensity_label = Config.INTENSITY_LABELS.get(intensity)
        if intensity_label is None:
            logger.warning(f"Unknown intensity {intensity}, using default")
            intensity_label = Config.INTENSITY_LABELS[Config.DEFAULT_INTENSITY]

        prompt_lines = [
            "Generate a weekly study schedule as JSON with this schema:",
            json.dumps(self.schema(), indent=2),
            "",
            "Class times:",
        ]
        if class_times:
            prompt_lines.extend(f"- {line}" for line in class_times)
        else:
            prompt_lines.append("- none")
        prompt_lines.extend([
            "",
            f"Study goals: {study_goals.strip()}",
            f"Study intensity: {intensity_label}",
            "",
            "RULES:",
            "- Only schedule study sessions; leave slots that overlap a class empty.",
            "- Spread the goals across the week.",
            "- Use \"\" or \"-\" for slots with no session.",
            "",
            "IMPORTANT: Return ONLY valid JSON (no text, no markdown, no explanations).",
        ])

        prompt = "\n".join(prompt_lines)
        logger.debug(f"Built schedule prompt ({len(prompt)} characters)")
        return prompt
