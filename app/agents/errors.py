## Errors raised while turning a form submission into a capstone project


class CapstoneError(Exception):
    """Base error. `message` is safe to show to the user."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"error": self.message}


# -------------------------
# Client input (400)
# -------------------------
class InvalidInputError(CapstoneError):
    status_code = 400


class MissingFieldError(InvalidInputError):
    message = "All fields (industry, projectType, difficulty) are required."


class InvalidOptionError(InvalidInputError):
    field = ""
    label = ""

    def __init__(self, value: str, valid_options: tuple[str, ...] | list[str]):
        self.value = value
        self.valid_options = list(valid_options)
        super().__init__(f"Invalid {self.label}. Must be one of: {', '.join(self.valid_options)}")

    def to_payload(self) -> dict:
        return {"error": self.message, "validOptions": self.valid_options}


class InvalidIndustryError(InvalidOptionError):
    field = "industry"
    label = "industry"


class InvalidProjectTypeError(InvalidOptionError):
    field = "projectType"
    label = "project type"


class InvalidDifficultyError(InvalidOptionError):
    field = "difficulty"
    label = "difficulty level"


# -------------------------
# Generation service (500)
# -------------------------
class GenerationError(CapstoneError):
    status_code = 500


class EmptyResponseError(GenerationError):
    message = "Received empty response from AI model"


class MalformedJSONError(GenerationError):
    message = "Invalid JSON response from AI model"


class InvalidResponseShapeError(GenerationError):
    message = "Invalid response structure from AI model"


class UpstreamServiceError(GenerationError):
    message = "The AI model service is unavailable. Please try again."
