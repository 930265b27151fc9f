from typing import Literal

NameSelect = Literal["official", "alias", "all"]

SELECT_MODES: tuple[str, ...] = ("official", "alias", "all")


def validate_select(select: str) -> None:
    """Raise ValueError if select is not one of official, alias, all."""
    if select not in SELECT_MODES:
        raise ValueError(f"select must be one of {', '.join(SELECT_MODES)}; got {select!r}")


def select_name(names: str | list[str], select: str = "official") -> str | list[str]:
    """Pick a country name out of a stored "name" or ["official", "alias"] value.

    official: first name. alias: second name, falling back to the first.
    all: every name, as a list.
    """
    validate_select(select)

    if select == "official":
        return names[0] if isinstance(names, list) else names
    if select == "alias":
        if isinstance(names, list):
            return names[1] if len(names) > 1 and names[1] else names[0]
        return names
    return [names] if isinstance(names, str) else list(names)
