"""Layout settings for the input box."""

from __future__ import annotations

from dataclasses import dataclass

from vim_input.runtime import telemetry


class ConfigError(ValueError):
    """Raised when layout settings cannot produce a usable viewport."""

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Viewport geometry shared by the editor and the rendered input box.

    ``viewport_width`` is the box width in terminal columns; ``margin`` columns
    are kept free for the border so the visible text is limited to
    ``viewport_width - margin`` columns. ``header_offset`` is the distance in
    rows between the anchor position and the top of the box.
    """

    viewport_width: int = 50
    margin: int = 2
    height: int = 3
    header_offset: int = 2

    def __post_init__(self) -> None:
        for name in ("viewport_width", "height"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be positive", field_name=name)
        for name in ("margin", "header_offset"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} cannot be negative", field_name=name)
        if self.limit < 1:
            raise ConfigError(
                "margin leaves no room for text in the viewport", field_name="margin"
            )

    @property
    def limit(self) -> int:
        return self.viewport_width - self.margin

    @classmethod
    def from_env(cls) -> "EditorConfig":
        defaults = cls()
        try:
            return cls(
                viewport_width=telemetry.env_int(
                    "VIEWPORT_WIDTH", defaults.viewport_width
                ),
                margin=telemetry.env_int("VIEWPORT_MARGIN", defaults.margin),
                height=telemetry.env_int("INPUT_HEIGHT", defaults.height),
                header_offset=telemetry.env_int(
                    "HEADER_OFFSET", defaults.header_offset
                ),
            )
        except ConfigError:
            raise
        except ValueError as exc:
            raise ConfigError(f"invalid {telemetry.ENV_PREFIX}* setting: {exc}") from exc


__all__ = ["ConfigError", "EditorConfig"]
