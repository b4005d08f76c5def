"""
Renaming of generated classes.

Two ways are offered:

- ``rename_references`` replaces the spans recorded by the emitter. It is
  exact and also updates field types that point to the class.
- ``rename_class`` works on plain text (e.g. a document edited by hand, for
  which no span table exists). It only rewrites the declaration, factory and
  ``_``/``$`` prefixed forms of the name, and requires an identifier boundary
  after the name so that ``User`` is left alone inside ``UserDetail``.
"""

from __future__ import annotations

import logging
import re

from .emitter import ClassReference

logger = logging.getLogger(__name__)

# Characters that may continue a Dart identifier
_IDENT_CHAR = r"[\w$]"

_CLASS_DECLARATION_PATTERN = re.compile(r"\bclass\s+(\w+)")


def collect_class_names(document: str) -> list[str]:
    """Names declared with ``class <Name>``, in document order."""
    return _CLASS_DECLARATION_PATTERN.findall(document)


def rename_class(document: str, old_name: str, new_name: str) -> str:
    """
    Rename a class everywhere its generated boilerplate mentions it.

    Args:
        document: Generated freezed source
        old_name: Current class name
        new_name: Replacement name

    Returns:
        The rewritten document
    """
    if not old_name or old_name == new_name:
        return document

    old = re.escape(old_name)
    after_name = f"(?!{_IDENT_CHAR})"

    # class Foo / factory Foo / fromJson Foo
    updated = re.sub(
        rf"(?<!{_IDENT_CHAR})(class|factory|fromJson)(\s+){old}{after_name}",
        lambda m: f"{m.group(1)}{m.group(2)}{new_name}",
        document,
    )
    # = _Foo;
    updated = re.sub(rf"(?<!{_IDENT_CHAR})_{old}{after_name}", lambda m: f"_{new_name}", updated)
    # _$Foo mixin and _$FooFromJson
    updated = re.sub(rf"\${old}(?=FromJson{after_name}|{after_name})", lambda m: f"${new_name}", updated)
    return updated


def rename_references(
    text: str,
    references: tuple[ClassReference, ...],
    old_name: str,
    new_name: str,
) -> tuple[str, tuple[ClassReference, ...]]:
    """
    Replace every recorded reference to ``old_name``.

    Args:
        text: The emitted document
        references: Its class reference spans, in text order
        old_name: Current class name
        new_name: Replacement name

    Returns:
        The new text and the shifted reference spans
    """
    pieces = []
    updated = []
    position = 0
    shift = 0
    for reference in references:
        start = reference.start + shift
        if reference.name != old_name:
            updated.append(ClassReference(start, reference.end + shift, reference.name))
            continue
        pieces.append(text[position : reference.start])
        pieces.append(new_name)
        position = reference.end
        updated.append(ClassReference(start, start + len(new_name), new_name))
        shift += len(new_name) - len(old_name)
    pieces.append(text[position:])

    logger.debug("Renamed %s to %s", old_name, new_name)
    return "".join(pieces), tuple(updated)
