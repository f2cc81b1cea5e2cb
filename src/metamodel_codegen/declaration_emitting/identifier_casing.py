"""Exported Go identifier casing."""

from __future__ import annotations

# Initialisms Go style keeps fully upper-cased (golint's commonInitialisms).
# fmt: off
GO_INITIALISMS = frozenset({
    "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP",
    "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA",
    "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP", "UI", "UID", "UUID",
    "URI", "URL", "UTF8", "VM", "XML", "XMPP", "XSRF", "XSS",
})
# fmt: on


def split_words(name: str) -> list[str]:
    """Split a camelCase, PascalCase or separated name into words.

    Any character that is neither a letter nor a digit is a separator. Letters
    outside ASCII belong to words like any other letter.
    """
    words: list[str] = []
    current = ""
    for index, char in enumerate(name):
        if not char.isalnum():
            if current:
                words.append(current)
            current = ""
            continue
        if current and _starts_word(current[-1], char, name[index + 1 : index + 2]):
            words.append(current)
            current = ""
        current += char
    if current:
        words.append(current)
    return words


def to_exported_identifier(wire_name: str) -> str:
    """Derive an exported Go field name from a wire identifier.

    Only letter case changes: `textDocument` becomes `TextDocument`, `uri`
    becomes `URI` and `baseURI` stays `BaseURI`. Separators such as `_` and
    `-` only mark word boundaries.
    """
    words = split_words(wire_name)
    if not words:
        raise ValueError(f"Cannot derive an identifier from wire name {wire_name!r}")
    return "".join(_export_word(word) for word in words)


def _starts_word(previous: str, char: str, following: str) -> bool:
    if char.isdigit() != previous.isdigit():
        return True
    if char.isupper():
        # "HTTPServer" splits before the "S" that opens a capitalized word.
        return previous.islower() or (previous.isupper() and following.islower())
    return False


def _export_word(word: str) -> str:
    upper = word.upper()
    if upper in GO_INITIALISMS:
        return upper
    first = word[0].upper()
    # Some letters ("ß") upper-case to several characters.
    if len(first) != 1:
        first = word[0]
    return first + word[1:]
