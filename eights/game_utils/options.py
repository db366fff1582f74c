"""
Declarative game options.

Options are plain dataclass fields carrying metadata that describes their
default, valid range and localized label:

    @dataclass
    class MyGameOptions(GameOptions):
        ai_count: int = option_field(
            IntOption(default=3, min_val=1, max_val=3,
                      label="crazyeights-option-ai-count"))
        show_landing: bool = option_field(
            BoolOption(default=True, label="crazyeights-option-show-landing"))

String values (from the command line, for instance) go through
``GameOptions.set_from_string`` so every option validates the same way.
"""

from dataclasses import dataclass, field, fields
from typing import Any

from mashumaro.mixins.json import DataClassJSONMixin

from ..messages.localization import Localization


@dataclass
class OptionMeta:
    """Metadata for one option field."""

    default: Any
    label: str  # Localization key for the option label

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        raise NotImplementedError

    def get_label(self, locale: str, value: Any) -> str:
        return Localization.get(locale, self.label, **self.get_label_kwargs(value))

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        """Convert an input string to the option's type.

        Returns (success, converted_value). On failure the original string is
        returned as the second element.
        """
        raise NotImplementedError


@dataclass
class IntOption(OptionMeta):
    """Integer option, clamped into [min_val, max_val]."""

    min_val: int = 0
    max_val: int = 100
    value_key: str = "value"

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        return {self.value_key: value}

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        try:
            int_val = int(value)
        except ValueError:
            return False, value
        return True, max(self.min_val, min(self.max_val, int_val))


@dataclass
class BoolOption(OptionMeta):
    """On/off option."""

    value_key: str = "enabled"

    def get_label_kwargs(self, value: Any) -> dict[str, Any]:
        return {self.value_key: "on" if value else "off"}

    def validate_and_convert(self, value: str) -> tuple[bool, Any]:
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True, True
        if lowered in ("false", "0", "no", "off"):
            return True, False
        return False, value


def option_field(meta: OptionMeta) -> Any:
    """Create a dataclass field with option metadata attached."""
    return field(default=meta.default, metadata={"option_meta": meta})


def get_option_meta(options_class: type, field_name: str) -> OptionMeta | None:
    for f in fields(options_class):
        if f.name == field_name:
            return f.metadata.get("option_meta")
    return None


def get_all_option_metas(options_class: type) -> dict[str, OptionMeta]:
    result = {}
    for f in fields(options_class):
        meta = f.metadata.get("option_meta")
        if meta is not None:
            result[f.name] = meta
    return result


@dataclass
class GameOptions(DataClassJSONMixin):
    """Base class for a game's options."""

    def get_option_metas(self) -> dict[str, OptionMeta]:
        return get_all_option_metas(type(self))

    def set_from_string(self, name: str, value: str) -> str | None:
        """
        Set an option from its string form.

        Returns None on success, or a localization key describing the failure.
        """
        meta = get_option_meta(type(self), name)
        if meta is None:
            return "option-unknown"
        success, converted = meta.validate_and_convert(value)
        if not success:
            return "option-invalid-value"
        setattr(self, name, converted)
        return None

    def describe(self, locale: str = "en") -> list[dict[str, Any]]:
        """One dict per option: name, type, current value, label and range."""
        described = []
        for name, meta in self.get_option_metas().items():
            value = getattr(self, name)
            entry: dict[str, Any] = {
                "name": name,
                "type": type(value).__name__,
                "default": meta.default,
                "value": value,
                "label": meta.get_label(locale, value),
            }
            if isinstance(meta, IntOption):
                entry["min"] = meta.min_val
                entry["max"] = meta.max_val
            described.append(entry)
        return described
