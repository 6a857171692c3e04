import json
import logging
import random

from pydantic import ValidationError

from app.agents.errors import InvalidResponseShapeError, MalformedJSONError
from app.agents.llm.base import LLMClient
from app.agents.schemas import CapstoneProject, ProjectInput, SamplingConfig

logger = logging.getLogger(__name__)

SYSTEM_CAPSTONE = """Generate a capstone project title and objectives based on the provided inputs.

Content requirements. The output must include:
1. project_title: a concise, engaging and relevant title based on the given inputs.
2. description: a brief explanation of what the project is about, highlighting its purpose and significance.
3. objectives: a list of 3-5 clear and actionable objectives, each describing a specific goal of the project.

Inputs:
- Industry: the sector the project serves, such as healthcare, education, agriculture or technology.
- Project type: the kind of system to build, such as a data project, IoT system, web app or mobile app.
- Difficulty level: beginner, intermediate or advanced.

Output format. Return ONLY one JSON object (no markdown, no code fences, no commentary):
{
  "project_title": "string",
  "description": "string",
  "objectives": ["string", "string", "string"]
}

Example input:
{"industry": "healthcare", "project_type": "data", "difficulty": "intermediate"}

Example output:
{
  "project_title": "Optimizing Healthcare Data Management for Improved Patient Insights",
  "description": "This project focuses on enhancing the storage, processing, and analysis of healthcare data, ensuring better accessibility and decision-making.",
  "objectives": [
    "Design an efficient healthcare data storage system to improve data accessibility and integrity.",
    "Develop a secure data pipeline for seamless integration of patient records across platforms.",
    "Implement data visualization techniques to help healthcare professionals interpret complex datasets.",
    "Optimize query performance for faster retrieval of patient information.",
    "Ensure compliance with healthcare regulations such as HIPAA for data security and privacy."
  ]
}

Generation guidelines:
- The title must be unique and engaging.
- The description must be concise yet informative.
- The objectives must be actionable and relevant to the project scope.
- The output must be strictly formatted as JSON.
"""


def build_capstone_prompt(industry: str, project_type: str, difficulty: str) -> str:
    return (
        "Generate a unique and creative capstone project title and objectives "
        f"for an {industry} {project_type} project at {difficulty} level. "
        "Ensure it is different from previous generations."
    )


def capstone_sampling_config(rng: random.Random | None = None) -> SamplingConfig:
    """
    Sampling settings for one generation.
    Temperature is jittered within [0.7, 0.9) so repeated identical inputs
    produce different projects.
    """
    rng = rng or random
    return SamplingConfig(
        temperature=0.7 + rng.random() * 0.2,
        top_p=0.9,
        top_k=40,
        max_output_tokens=2048,
        json_output=True,
    )


def decode_capstone_project(raw_text: str) -> CapstoneProject:
    try:
        data = json.loads(raw_text)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error("Failed to parse AI response as JSON: %s", e)
        logger.debug("Unparseable AI response: %r", raw_text)
        raise MalformedJSONError() from e

    if not isinstance(data, dict):
        logger.error("AI response is JSON but not an object: %s", type(data).__name__)
        raise InvalidResponseShapeError()

    try:
        return CapstoneProject.model_validate(data)
    except ValidationError as e:
        logger.error("AI response has invalid structure: %s", e)
        raise InvalidResponseShapeError() from e


def generate_capstone_project(project: ProjectInput, llm: LLMClient,
                              rng: random.Random | None = None) -> CapstoneProject:
    prompt = build_capstone_prompt(project.industry, project.project_type, project.difficulty)
    logger.info("Sending prompt: %s", prompt)

    raw_text = llm.generate(system=SYSTEM_CAPSTONE, user=prompt, config=capstone_sampling_config(rng))
    logger.debug("Received raw response: %r", raw_text)

    capstone = decode_capstone_project(raw_text)
    logger.info("Generated capstone project: %s", capstone.project_title)
    return capstone
