"""Stateless rendering of lookup results.

Both renderers take an immutable result and return a string; they hold no
state between calls, so whichever result is current is all that is shown.
"""

import html

from word_lookup.models import Definition, EmptyInput, LookupResult, Success


def render_result(result: LookupResult) -> str:
    """Render a result as plain text for the console.

    Args:
        result: Any lookup result variant

    Returns:
        Multi-line text
    """
    if isinstance(result, Success):
        return _render_definition(result.definition)

    lines = [result.emoji, result.title, result.message]
    if isinstance(result, EmptyInput):
        lines.append(result.hint)
    return "\n".join(lines)


def _render_definition(definition: Definition) -> str:
    lines = [definition.word]
    if definition.phonetic:
        lines.append(definition.phonetic)

    for meaning in definition.meanings:
        lines.append("")
        lines.append(meaning.part_of_speech)
        lines.append("-" * 40)
        lines.append("Meaning")
        for i, sense in enumerate(meaning.senses, 1):
            lines.append(f"  {i}. {sense.definition}")
            if sense.example:
                lines.append(f'     "{sense.example}"')
        if meaning.has_synonyms:
            lines.append(f"Synonyms  {', '.join(meaning.synonyms)}")

    if definition.primary_source:
        lines.append("")
        lines.append(f"Source: {definition.primary_source}")

    return "\n".join(lines)


def render_result_html(result: LookupResult) -> str:
    """Render a result as rich text for Qt text widgets.

    All service-provided text is escaped.
    """
    if not isinstance(result, Success):
        return (
            f"<div align='center'><p style='font-size:48px'>{result.emoji}</p>"
            f"<h2>{html.escape(result.title)}</h2>"
            f"<p>{html.escape(result.message)}</p></div>"
        )

    definition = result.definition
    parts = [f"<h1>{html.escape(definition.word)}</h1>"]
    if definition.phonetic:
        parts.append(f"<p><i>{html.escape(definition.phonetic)}</i></p>")

    for meaning in definition.meanings:
        parts.append(f"<h2><i>{html.escape(meaning.part_of_speech)}</i></h2><hr>")
        parts.append("<p>Meaning</p><ul>")
        for sense in meaning.senses:
            item = html.escape(sense.definition)
            if sense.example:
                item += f"<br><span>&quot;{html.escape(sense.example)}&quot;</span>"
            parts.append(f"<li>{item}</li>")
        parts.append("</ul>")
        if meaning.has_synonyms:
            synonyms = html.escape(", ".join(meaning.synonyms))
            parts.append(f"<p>Synonyms&nbsp;&nbsp;<b>{synonyms}</b></p>")

    source = definition.primary_source
    if source:
        escaped = html.escape(source, quote=True)
        parts.append(f"<hr><p>Source: <a href='{escaped}'>{escaped}</a></p>")

    return "".join(parts)
