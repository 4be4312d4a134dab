"""Internationalization helpers for the installer UI.

Holds the English and Swedish UI strings and the ``translate`` lookup used by
every module that prints to the console. Strings may contain ``str.format``
placeholders which callers fill in.

Typical usage::

    from odoo_setup.i18n import _, set_language

    set_language("sv")
    print(_("cloning").format(version="18.0"))

"""

from __future__ import annotations

from odoo_setup.config import LANG as _DEFAULT_LANG

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "Odoo local development installer",
        "step_prereqs": "Checking prerequisites",
        "step_version": "Selecting Odoo version",
        "step_dirs": "Preparing directories",
        "step_source": "Fetching Odoo source",
        "step_prefetch": "Fetching dependency manifest",
        "step_venv": "Creating virtual environment",
        "step_deps": "Installing dependencies",
        "step_conf": "Writing configuration",
        "step_summary": "Summary",
        "tool_found": "{tool} found: {path}",
        "git_missing": (
            "Git was not found on PATH. Install it from {url} and run the "
            "installer again."
        ),
        "uv_missing": "uv (Python package and environment manager) was not found on PATH.",
        "uv_install_prompt": "Install uv now?",
        "uv_installing": "Installing uv...",
        "uv_install_declined": (
            "uv is required. Install it manually (https://docs.astral.sh/uv/) "
            "and run the installer again."
        ),
        "uv_restart_required": (
            "uv was installed. Open a new terminal so it is on PATH and run the "
            "installer again."
        ),
        "uv_install_failed": "Installing uv failed (Return code: {code}).",
        "versions_title": "Available Odoo versions",
        "col_choice": "#",
        "col_version": "Odoo",
        "col_python": "Python",
        "version_prompt": "Select a version [1-{count}]: ",
        "version_selected": "Selected Odoo {version} (Python {python})",
        "dir_created": "Created {path}",
        "dir_exists": "Using existing {path}",
        "clone_exists_prompt": "{path} already exists. Delete it and clone again?",
        "clone_removed": "Removed {path}",
        "clone_kept": "Keeping existing source in {path}; clone skipped.",
        "cloning": "Cloning Odoo {version} (single branch)...",
        "clone_failed": "git clone failed (Return code: {code}).",
        "clone_done": "Source cloned into {path}",
        "requirements_missing": "Dependency manifest not found: {path}",
        "prefetching": "Downloading requirements.txt for Odoo {version}...",
        "prefetch_failed": "Could not download {url}: {error}",
        "prefetch_done": "Saved {path}",
        "creating_venv": "Creating environment with Python {python}...",
        "venv_failed": "uv venv failed (Return code: {code}).",
        "venv_ready": "Environment ready: {path}",
        "installing_deps": "Installing dependencies from {path}...",
        "deps_fallback": (
            "Dependency install failed (Return code: {code}); retrying with a "
            "prebuilt libsass wheel."
        ),
        "downloading_wheel": "Downloading {url}...",
        "wheel_download_failed": "Could not download {url}: {error}",
        "installing_wheel": "Installing {path}...",
        "wheel_install_failed": "Installing {path} failed (Return code: {code}).",
        "reinstalling_deps": "Re-running dependency install with upgrades...",
        "deps_install_failed": "Dependency install failed again (Return code: {code}).",
        "deps_installed": "Dependencies installed.",
        "conf_written": "Configuration written to {path}",
        "summary_parent": "Install directory",
        "summary_source": "Source",
        "summary_venv": "Environment",
        "summary_conf": "Config file",
        "summary_data": "Data directory",
        "summary_addons": "Addons path",
        "summary_http_port": "HTTP port",
        "summary_longpolling_port": "Longpolling port",
        "summary_launch": "Start Odoo with:",
        "done": "Installation complete.",
        "invalid_selection": "Invalid selection '{choice}': enter a number between 1 and {count}.",
        "cancelled": "Cancelled by user.",
        "unexpected_error": "Unexpected error: {error}",
    },
    "sv": {
        "welcome": "Installationsprogram för lokal Odoo-utveckling",
        "step_prereqs": "Kontrollerar förutsättningar",
        "step_version": "Väljer Odoo-version",
        "step_dirs": "Förbereder kataloger",
        "step_source": "Hämtar Odoo-källkod",
        "step_prefetch": "Hämtar beroendelista",
        "step_venv": "Skapar virtuell miljö",
        "step_deps": "Installerar beroenden",
        "step_conf": "Skriver konfiguration",
        "step_summary": "Sammanfattning",
        "tool_found": "{tool} hittades: {path}",
        "git_missing": (
            "Git hittades inte i PATH. Installera det från {url} och kör "
            "installationen igen."
        ),
        "uv_missing": "uv (paket- och miljöhanterare för Python) hittades inte i PATH.",
        "uv_install_prompt": "Installera uv nu?",
        "uv_installing": "Installerar uv...",
        "uv_install_declined": (
            "uv krävs. Installera det manuellt (https://docs.astral.sh/uv/) "
            "och kör installationen igen."
        ),
        "uv_restart_required": (
            "uv installerades. Öppna en ny terminal så att det finns i PATH och "
            "kör installationen igen."
        ),
        "uv_install_failed": "Installationen av uv misslyckades (Returkod: {code}).",
        "versions_title": "Tillgängliga Odoo-versioner",
        "col_choice": "#",
        "col_version": "Odoo",
        "col_python": "Python",
        "version_prompt": "Välj en version [1-{count}]: ",
        "version_selected": "Valde Odoo {version} (Python {python})",
        "dir_created": "Skapade {path}",
        "dir_exists": "Använder befintlig {path}",
        "clone_exists_prompt": "{path} finns redan. Ta bort och klona igen?",
        "clone_removed": "Tog bort {path}",
        "clone_kept": "Behåller befintlig källkod i {path}; kloning hoppas över.",
        "cloning": "Klonar Odoo {version} (en gren)...",
        "clone_failed": "git clone misslyckades (Returkod: {code}).",
        "clone_done": "Källkoden klonades till {path}",
        "requirements_missing": "Beroendelistan saknas: {path}",
        "prefetching": "Laddar ner requirements.txt för Odoo {version}...",
        "prefetch_failed": "Kunde inte ladda ner {url}: {error}",
        "prefetch_done": "Sparade {path}",
        "creating_venv": "Skapar miljö med Python {python}...",
        "venv_failed": "uv venv misslyckades (Returkod: {code}).",
        "venv_ready": "Miljön är klar: {path}",
        "installing_deps": "Installerar beroenden från {path}...",
        "deps_fallback": (
            "Installationen av beroenden misslyckades (Returkod: {code}); försöker "
            "igen med ett förbyggt libsass-hjul."
        ),
        "downloading_wheel": "Laddar ner {url}...",
        "wheel_download_failed": "Kunde inte ladda ner {url}: {error}",
        "installing_wheel": "Installerar {path}...",
        "wheel_install_failed": "Installationen av {path} misslyckades (Returkod: {code}).",
        "reinstalling_deps": "Kör installationen av beroenden igen med uppgraderingar...",
        "deps_install_failed": (
            "Installationen av beroenden misslyckades igen (Returkod: {code})."
        ),
        "deps_installed": "Beroenden installerade.",
        "conf_written": "Konfigurationen skrevs till {path}",
        "summary_parent": "Installationskatalog",
        "summary_source": "Källkod",
        "summary_venv": "Miljö",
        "summary_conf": "Konfigurationsfil",
        "summary_data": "Datakatalog",
        "summary_addons": "Sökväg för moduler",
        "summary_http_port": "HTTP-port",
        "summary_longpolling_port": "Longpolling-port",
        "summary_launch": "Starta Odoo med:",
        "done": "Installationen är klar.",
        "invalid_selection": "Ogiltigt val '{choice}': ange ett tal mellan 1 och {count}.",
        "cancelled": "Avbrutet av användaren.",
        "unexpected_error": "Oväntat fel: {error}",
    },
}


def translate(key: str) -> str:
    r"""Translate a UI key to the current language.

    Parameters
    ----------
    key : str
        The string key of the UI text.

    Returns
    -------
    str
        The translated string, the English string when the current language
        lacks the key, or the key itself when no language has it.

    Examples
    --------
    >>> translate("step_deps")
    'Installing dependencies'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    texts = TEXTS.get(LANG, TEXTS["en"])
    return texts.get(key, TEXTS["en"].get(key, key))


_ = translate


def set_language(lang: str) -> None:
    """Switch the UI language; unknown codes fall back to English."""
    global LANG
    LANG = lang if lang in TEXTS else "en"


__all__ = ["LANG", "TEXTS", "_", "set_language", "translate"]
