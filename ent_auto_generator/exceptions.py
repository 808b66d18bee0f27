"""
Custom exception hierarchy for the ent schema generator.

Every fatal fault raised by the generator derives from EntGeneratorError,
which carries structured context and recovery suggestions so that the CLI
can print something actionable.
"""

from typing import Dict, Any, Optional, List


class EntGeneratorError(Exception):
    """
    Base exception for all ent schema generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(EntGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify every value has the expected type",
                "Remove unknown or misspelled keys",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaLoadError(EntGeneratorError):
    """Raised when the DMMF document cannot be read or has an unexpected shape."""

    def __init__(self, message: str, schema_path: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if schema_path:
            context['schema_path'] = schema_path

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the DMMF JSON file exists and is readable",
                "Regenerate the DMMF dump from the current schema.prisma",
                "Verify the document contains 'models' and 'enums' lists",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_LOAD_ERROR"
        )


class MissingEnumDefinitionError(EntGeneratorError):
    """Raised when an enum field references an enum absent from the document."""

    def __init__(self, enum_name: str, entity: Optional[str] = None, field: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        context['enum'] = enum_name
        if entity:
            context['entity'] = entity
        if field:
            context['field'] = field

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the enum is declared in the source schema",
                "Regenerate the DMMF dump, it may be stale or truncated",
            ]

        super().__init__(
            f"Enum '{enum_name}' is not defined in the model document",
            context=context,
            suggestions=suggestions,
            error_code="MISSING_ENUM_ERROR"
        )


class CodeGenerationError(EntGeneratorError):
    """Raised when rendering a schema file from its template fails."""

    def __init__(self, message: str, entity: Optional[str] = None, template: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if entity:
            context['entity'] = entity
        if template:
            context['template'] = template

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the package templates were installed",
                "Check the entity for names that are not valid Go identifiers",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )


class OutputWriteError(EntGeneratorError):
    """Raised when the output directory or a generated file cannot be written."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check write permissions on the output directory",
                "Check that the output path is not an existing file",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="OUTPUT_WRITE_ERROR"
        )


class GoGenerateError(EntGeneratorError):
    """Raised when the post-generation `go generate` step fails."""

    def __init__(self, message: str, command: Optional[List[str]] = None, returncode: Optional[int] = None, **kwargs):
        context = kwargs.get('context', {})
        if command:
            context['command'] = " ".join(command)
        if returncode is not None:
            context['returncode'] = returncode

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the Go toolchain is installed and on PATH",
                "Check that ent/generate.go exists in the target directory",
                "Run `go generate ./ent` manually to see the full output",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="GO_GENERATE_ERROR"
        )
