"""Localized strings written into exported notebooks."""
from typing import Dict, Optional

DEFAULT_LOCALE = "en"

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "export_change_directory_comment":
            "# Change directory to the workspace root so relative paths load the same way they did in the interactive session",
    },
    "de": {
        "export_change_directory_comment":
            "# Arbeitsverzeichnis auf das Stammverzeichnis des Arbeitsbereichs setzen, damit relative Pfade wie in der interaktiven Sitzung geladen werden",
    },
    "es": {
        "export_change_directory_comment":
            "# Cambiar el directorio a la raíz del área de trabajo para que las rutas relativas se carguen igual que en la sesión interactiva",
    },
}


def localize(key: str, locale: Optional[str] = None) -> str:
    """
    Look up ``key`` for ``locale``.

    Regional variants fall back to their language (``de-AT`` -> ``de``),
    unknown locales to English. Unknown keys raise ``KeyError``.
    """
    locale = (locale or DEFAULT_LOCALE).lower()
    table = STRINGS.get(locale) or STRINGS.get(locale.split("-")[0]) or STRINGS[DEFAULT_LOCALE]
    if key in table:
        return table[key]
    return STRINGS[DEFAULT_LOCALE][key]
