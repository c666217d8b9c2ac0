"""Ordered folder/extension rule table for zone asset classification."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """Maps files under a zone subfolder with a matching name to an asset type."""

    folder: str
    extension_pattern: re.Pattern
    type: str
    force_full_path: bool = False

    @property
    def prefix(self) -> str:
        """Relative-path prefix a file must start with to fall under this rule."""
        return self.folder + "/"

    def matches(self, rel_path: str, filename: str) -> bool:
        """
        Check whether a file falls under this rule.

        Args:
            rel_path: Forward-slash path relative to the zone folder
            filename: Base name of the file (pattern is never applied to directories)

        Returns:
            True if the folder prefix and the extension pattern both match
        """
        return rel_path.startswith(self.prefix) and bool(
            self.extension_pattern.search(filename)
        )


def _rule(folder: str, pattern: str, type_: str, force_full_path: bool = False) -> Rule:
    return Rule(folder, re.compile(pattern, re.IGNORECASE), type_, force_full_path)


# First match wins, so sub-folder rules must come before their parent folder.
RULES: tuple[Rule, ...] = (
    _rule("xsurface", r"\.xsb$", "xmodelsurfs"),
    _rule("xmodel", r"\.xmb$", "xmodel"),
    _rule("xanime", r"\.xab$", "xanim"),
    _rule("weapons", r"\.json$", "weapon"),
    _rule("vision", r"\.vision$", "rawfile"),
    _rule("vehicles", r"\.json$", "vehicle"),
    _rule("tracer", r"^[^.]+$", "tracer"),
    _rule("techsets/ps", r"\.(hlsl_h2|cso)$", "pixelshader"),
    _rule("techsets/vs", r"\.(hlsl_h2|cso)$", "vertexshader"),
    _rule("techsets", r"\.(cbi|cbt)$", "material"),
    _rule("sounds", r"\.json$", "sound"),
    _rule("sndcurve", r"\.json$", "sndcurve"),
    _rule("sndcontext", r"^[^.]+$", "sndcontext"),
    _rule("rumble", r"^[^.]+$", "rawfile", force_full_path=True),
    _rule("reverbsendcurve", r"\.json$", "sndcurve"),
    _rule("physpreset", r"\.pp$", "physpreset"),
    _rule("physcollmap", r"\.pc$", "phys_collmap"),
    _rule("materials", r"\.json$", "material"),
    _rule("lpfcurve", r"\.json$", "lpfcurve"),
    _rule("loaded_sound", r"\.(flac|wav|mp3)$", "loaded_sound"),
    _rule("images", r"\.(h1Image|tga|dds)$", "image"),
    _rule("effects", r"\.fxe$", "fx"),
    _rule("aim_assist", r"\.graph$", "rawfile"),
    _rule("animtrees", r"\.atr$", "rawfile"),
    _rule("attachments", r"\.json$", "attachment"),
    _rule("info", r"^[^.]+$", "rawfile"),
    _rule("maps", r"\.(gsc|gscbin)$", "scriptfile"),
    _rule("mp", r"\.(script|cfg|txt|recipe)$", "rawfile"),
    _rule("netconststrings", r"\.json$", "netconststrings"),
    _rule("skeletonscript", r"^[^.]+$", "skeletonscript"),
    _rule("transient", r"\.asslist$", "rawfile"),
    _rule("ui", r"\.lua$", "luafile"),
    _rule("ui_mp", r"\.txt$", "menufile"),
    _rule("localizedstrings", r"^[^.]+$", "localize"),
)

# Files directly inside the zone folder are typed by extension alone
ROOT_EXTENSION_TYPES: dict[str, str] = {
    "csv": "stringtable",
    "gsc": "rawfile",
    "lua": "rawfile",
    "gscbin": "scriptfile",
}

DEFAULT_TYPE = "rawfile"


def match_rule(rel_path: str, filename: str) -> Rule | None:
    """
    Find the first rule that applies to a file.

    Args:
        rel_path: Forward-slash path relative to the zone folder
        filename: Base name of the file

    Returns:
        The first matching Rule, or None if no rule applies
    """
    for rule in RULES:
        if rule.matches(rel_path, filename):
            return rule
    return None


def root_type_for(extension: str) -> str:
    """Get the asset type for a root-level file from its lower-case extension."""
    return ROOT_EXTENSION_TYPES.get(extension, DEFAULT_TYPE)
