"""Structured error hierarchy for the agent loop."""

from __future__ import annotations


class AgentError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.cause = cause

    @classmethod
    def wrap(cls, err: Exception) -> AgentError:
        if isinstance(err, AgentError):
            return err
        return AgentError("UNKNOWN", str(err), err)


class ConfigurationError(AgentError):
    """Bad credentials, URL or template. Raised before any step runs."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__("CONFIGURATION_ERROR", message, cause)


class TemplateError(ConfigurationError):
    def __init__(self, template: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(f'Template "{template}": {message}', cause)
        self.template = template


class TransportError(AgentError):
    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__("TRANSPORT_ERROR", message, cause)
        self.provider = provider
        self.status_code = status_code


class ParseError(AgentError):
    def __init__(self, raw: str, message: str, cause: Exception | None = None) -> None:
        super().__init__("PARSE_ERROR", message, cause)
        self.raw = raw


class ResolutionError(AgentError):
    pass


class UnknownTool(ResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__("UNKNOWN_TOOL", f'Unknown command "{name}"')
        self.name = name


class MissingArgument(ResolutionError):
    def __init__(self, tool: str, field: str, cause: Exception | None = None) -> None:
        super().__init__(
            "MISSING_ARGUMENT",
            f'Command "{tool}" is missing argument "{field}" or it is not a valid value',
            cause,
        )
        self.tool = tool
        self.field = field


class ToolExecutionError(AgentError):
    def __init__(self, tool_name: str, message: str, cause: Exception | None = None) -> None:
        super().__init__("TOOL_EXECUTION_ERROR", f'Command "{tool_name}" failed: {message}', cause)
        self.tool_name = tool_name
