"""Error hierarchy for boilerplate generation."""


class BoilerplateError(Exception):
    """Base class for generation errors."""

    pass


class ArityRangeError(BoilerplateError):
    """Arity range is empty or negative."""

    pass


class TemplateConfigurationError(BoilerplateError):
    """Template or generator is configured in a way that cannot produce a body."""

    pass


class UnknownPatternError(TemplateConfigurationError):
    """Requested pattern id is not registered."""

    pass


class MalformedTemplateError(BoilerplateError):
    """Template rendered a line without a recognised marker."""

    pass


class GenerationWriteError(BoilerplateError):
    """Writing a generated file failed."""

    def __init__(self, path, reason: str):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
