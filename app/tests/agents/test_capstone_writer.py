import json
import random

import pytest

from app.agents.capstone_writer import (
    SYSTEM_CAPSTONE,
    build_capstone_prompt,
    capstone_sampling_config,
    decode_capstone_project,
    generate_capstone_project,
)
from app.agents.errors import (
    EmptyResponseError,
    InvalidResponseShapeError,
    MalformedJSONError,
    UpstreamServiceError,
)
from app.agents.schemas import CapstoneProject, ProjectInput

VALID_REPLY = '{"project_title":"X","description":"Y","objectives":["a","b","c"]}'


def test_prompt_embeds_inputs_verbatim():
    prompt = build_capstone_prompt("healthcare", "ai/ml", "intermediate")

    assert "healthcare" in prompt
    assert "ai/ml" in prompt
    assert "intermediate" in prompt
    assert prompt == build_capstone_prompt("healthcare", "ai/ml", "intermediate")


def test_system_instruction_describes_output_shape():
    for key in ("project_title", "description", "objectives"):
        assert key in SYSTEM_CAPSTONE
    assert "3-5" in SYSTEM_CAPSTONE


def test_sampling_config_fixed_values():
    config = capstone_sampling_config()

    assert config.top_p == 0.9
    assert config.top_k == 40
    assert config.max_output_tokens == 2048
    assert config.json_output is True


def test_sampling_temperature_is_jittered_within_bounds():
    rng = random.Random(1234)
    temps = [capstone_sampling_config(rng).temperature for _ in range(200)]

    assert all(0.7 <= t < 0.9 for t in temps)
    assert len(set(temps)) > 1


class _EdgeRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_sampling_temperature_edges():
    assert capstone_sampling_config(_EdgeRng(0.0)).temperature == pytest.approx(0.7)
    assert capstone_sampling_config(_EdgeRng(0.999999)).temperature < 0.9


def test_decode_valid_reply():
    project = decode_capstone_project(VALID_REPLY)
    assert project == CapstoneProject(project_title="X", description="Y", objectives=["a", "b", "c"])


def test_decode_is_idempotent():
    assert decode_capstone_project(VALID_REPLY) == decode_capstone_project(VALID_REPLY)


def test_encode_then_decode_gives_equal_value():
    project = CapstoneProject(
        project_title="Smart Irrigation",
        description="Soil sensors drive watering schedules.",
        objectives=["Deploy sensors", "Build dashboard", "Tune schedule", "Measure savings"],
    )
    assert decode_capstone_project(project.model_dump_json()) == project


def test_decode_does_not_bound_objective_count():
    reply = json.dumps({"project_title": "X", "description": "Y", "objectives": [str(i) for i in range(8)]})
    assert len(decode_capstone_project(reply).objectives) == 8


@pytest.mark.parametrize("raw", ["not json at all", "{'project_title': 'X'}", '{"project_title": "X"', ""])
def test_decode_malformed_json(raw):
    with pytest.raises(MalformedJSONError) as exc_info:
        decode_capstone_project(raw)
    assert exc_info.value.message == "Invalid JSON response from AI model"


@pytest.mark.parametrize(
    "data",
    [
        {"project_title": "X", "description": "Y"},
        {"project_title": "X", "objectives": ["a"]},
        {"description": "Y", "objectives": ["a"]},
        {"project_title": "", "description": "Y", "objectives": ["a"]},
        {"project_title": "X", "description": None, "objectives": ["a"]},
        {"project_title": "X", "description": "Y", "objectives": "a, b, c"},
        {"project_title": "X", "description": "Y", "objectives": []},
        {"project_title": "X", "description": "Y", "objectives": [1, 2, 3]},
        ["X", "Y", ["a"]],
        "just a string",
    ],
)
def test_decode_invalid_shape(data):
    with pytest.raises(InvalidResponseShapeError) as exc_info:
        decode_capstone_project(json.dumps(data))
    assert exc_info.value.message == "Invalid response structure from AI model"


def test_generate_capstone_project_uses_fixed_system_and_composed_prompt(fake_llm):
    llm = fake_llm(reply=VALID_REPLY)
    project_input = ProjectInput(industry="healthcare", projectType="data", difficulty="intermediate")

    result = generate_capstone_project(project_input, llm, rng=random.Random(7))

    assert result.project_title == "X"
    assert len(llm.calls) == 1
    call = llm.calls[0]
    assert call["system"] == SYSTEM_CAPSTONE
    assert call["user"] == build_capstone_prompt("healthcare", "data", "intermediate")
    assert 0.7 <= call["config"].temperature < 0.9


@pytest.mark.parametrize("reply", ["", "   \n"])
def test_generate_capstone_project_empty_reply(fake_llm, reply):
    llm = fake_llm(reply=reply)
    project_input = ProjectInput(industry="retail", projectType="web", difficulty="beginner")

    with pytest.raises(EmptyResponseError):
        generate_capstone_project(project_input, llm)


def test_generate_capstone_project_propagates_upstream_failure(fake_llm):
    llm = fake_llm(error=UpstreamServiceError())
    project_input = ProjectInput(industry="retail", projectType="web", difficulty="beginner")

    with pytest.raises(UpstreamServiceError):
        generate_capstone_project(project_input, llm)
    assert len(llm.calls) == 1


def test_decode_drops_extra_keys():
    reply = json.dumps({
        "project_title": "X",
        "description": "Y",
        "objectives": ["a", "b", "c"],
        "difficulty": "intermediate",
        "notes": "extra",
    })

    project = decode_capstone_project(reply)
    assert project.model_dump() == {"project_title": "X", "description": "Y", "objectives": ["a", "b", "c"]}


@pytest.mark.parametrize("field", ["project_title", "description"])
@pytest.mark.parametrize("blank", [" ", "\n\t"])
def test_decode_rejects_blank_title_or_description(field, blank):
    data = {"project_title": "X", "description": "Y", "objectives": ["a"], field: blank}

    with pytest.raises(InvalidResponseShapeError):
        decode_capstone_project(json.dumps(data))


def test_decode_keeps_surrounding_whitespace():
    reply = json.dumps({"project_title": " X ", "description": "Y\n", "objectives": ["a"]})
    assert decode_capstone_project(reply).project_title == " X "
