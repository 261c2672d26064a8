# File: sceudl/llm/client.py
"""
LLM integration module for SCEUDL.
Handles communication with the Gemini API and study-plan extraction.
"""

import json
import re
import requests
from typing import Any, Dict, List, Optional

from sceudl.core.config_manager import Config
from sceudl.llm.prompt_builder import PromptBuilder
from sceudl.utils.logger import setup_logger
from sceudl.models import ScheduleResponse, StudyPlan

logger = setup_logger(__name__)

_CODE_FENCE = re.compile(r'```(?:json)?', re.IGNORECASE)


def get_gemini_api_key() -> Optional[str]:
    """
    Retrieve the Gemini API key from configuration.

    Returns:
        API key string or None if not found
    """
    api_key = Config.GEMINI_API_KEY

    if not api_key or api_key == "your_gemini_api_key_here":
        logger.error("GEMINI_API_KEY not configured!")
        logger.error("""
Please set your Gemini API key in the .env file:
GEMINI_API_KEY='your-key-here'
Get your key from: https://ai.google.dev/gemini-api/docs/api-key
""")
        return None

    logger.debug("Gemini API key loaded successfully")
    return api_key


def _extract_json(llm_text: str) -> Optional[Dict[str, Any]]:
    """
    Extract the JSON object from a model reply.

    Args:
        llm_text: Raw text response from the model

    Returns:
        Parsed JSON dictionary or None if extraction fails
    """
    if not llm_text:
        logger.warning("Empty LLM text provided to _extract_json")
        return None

    # STEP 1 - Drop markdown code fences
    text = _CODE_FENCE.sub("", llm_text).strip()

    # STEP 2 - Try parsing it directly
    try:
        result = json.loads(text)
        if isinstance(result, dict):
            return result
    except json.JSONDecodeError:
        logger.debug("Direct JSON parsing failed, searching for an object block")

    # STEP 3 - Fall back to the outermost {...} block
    start, end = text.find('{'), text.rfind('}')
    if start == -1 or end <= start:
        logger.error("No JSON-like blocks found in LLM response")
        return None

    try:
        result = json.loads(text[start:end + 1])
    except json.JSONDecodeError:
        logger.error("All JSON extraction attempts failed")
        return None

    if not isinstance(result, dict):
        logger.error("LLM response JSON is not an object")
        return None
    return result


def _normalize_plan(data: Dict[str, Any]) -> StudyPlan:
    """
    Keep weekday entries whose value is a slot mapping; stringify task labels.
    """
    plan: StudyPlan = {}
    for day_name, slots in data.items():
        if not isinstance(slots, dict):
            logger.warning(f"Dropping non-mapping entry for '{day_name}'")
            continue
        plan[str(day_name)] = {
            str(slot): "" if task is None else str(task)
            for slot, task in slots.items()
        }
    return plan


def call_gemini_llm(
    prompt: str,
    model_id: str = Config.GEMINI_MODEL,
    api_key: Optional[str] = None
) -> ScheduleResponse:
    """
    Call the Gemini generateContent endpoint and parse the study plan.

    Args:
        prompt: Complete prompt text
        model_id: Model identifier to use
        api_key: Overrides the configured key

    Returns:
        ScheduleResponse with status 'success' and the plan, or 'fail' and a
        user-facing message
    """
    api_key = api_key or get_gemini_api_key()
    if not api_key:
        return ScheduleResponse(status="fail", message="Invalid or missing Gemini API key")

    logger.info(f"Calling Gemini with model: {model_id}")
    url = f"{Config.GEMINI_API_URL}/{model_id}:generateContent"
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": 0,
            "responseMimeType": "application/json",
        },
    }

    try:
        response = requests.post(
            url,
            params={"key": api_key},
            json=payload,
            timeout=Config.REQUEST_TIMEOUT
        )
        response.raise_for_status()
        data = response.json()

        candidates = data.get("candidates") or []
        if not candidates:
            logger.error("Gemini API returned no candidates")
            return ScheduleResponse(status="fail", message="No candidates in response", raw_response=data)

        parts = candidates[0].get("content", {}).get("parts", [])
        text = "".join(part.get("text", "") for part in parts).strip()
        if not text:
            logger.error("Model returned empty content")
            return ScheduleResponse(status="fail", message="Model returned empty content", raw_response=data)

        extracted = _extract_json(text)
        if extracted is None:
            return ScheduleResponse(status="fail", message="AI response was not valid JSON", raw_response=data)

        plan = _normalize_plan(extracted)
        logger.info(f"Study plan generated for {len(plan)} days")
        return ScheduleResponse(status="success", schedule=plan, raw_response=data)

    except requests.exceptions.Timeout:
        logger.error("Gemini API request timed out")
        return ScheduleResponse(status="fail", message="Request timed out")
    except requests.exceptions.RequestException as e:
        logger.error(f"Network error calling Gemini: {e}", exc_info=True)
        return ScheduleResponse(status="fail", message=f"Could not reach the schedule generator: {e}")
    except ValueError as e:
        logger.error(f"Invalid response from Gemini: {e}", exc_info=True)
        return ScheduleResponse(status="fail", message=str(e))


def generate_study_schedule(
    class_times: List[str],
    study_goals: str,
    intensity: int = Config.DEFAULT_INTENSITY,
    prompt_builder: Optional[PromptBuilder] = None
) -> ScheduleResponse:
    """
    Generate a weekly study plan.

    Args:
        class_times: Class-time lines
        study_goals: Free-text goals
        intensity: 1 (light) .. 3 (heavy)

    Returns:
        ScheduleResponse
    """
    if not study_goals or not study_goals.strip():
        return ScheduleResponse(status="fail", message="Study goals are required")

    builder = prompt_builder or PromptBuilder()
    prompt = builder.build_schedule_prompt(class_times, study_goals, intensity)
    return call_gemini_llm(prompt)
