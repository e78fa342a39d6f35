"""
English block table of the editor.

Each entry is ``(spec, shape, category)``. Only the spec is used when
resolving translations; shape and category are kept so the table reads the
same as the block palette it describes. Some specs appear twice with a
different shape (``if %b then`` as ``c`` and as ``e`` block).
"""

from __future__ import annotations

from typing import Final, NamedTuple


class BlockCommand(NamedTuple):
    """One block of the English palette."""

    spec: str
    shape: str
    category: str


ENGLISH_COMMANDS: Final[tuple[BlockCommand, ...]] = tuple(
    BlockCommand(*entry)
    for entry in (
        # motion
        ("move %n steps", " ", "motion"),
        ("turn @turnRight %n degrees", " ", "motion"),
        ("turn @turnLeft %n degrees", " ", "motion"),
        ("point in direction %d.direction", " ", "motion"),
        ("point towards %m.spriteOrMouse", " ", "motion"),
        ("go to x:%n y:%n", " ", "motion"),
        ("go to %m.location", " ", "motion"),
        ("glide %n secs to x:%n y:%n", " ", "motion"),
        ("change x by %n", " ", "motion"),
        ("set x to %n", " ", "motion"),
        ("change y by %n", " ", "motion"),
        ("set y to %n", " ", "motion"),
        ("set rotation style %m.rotationStyle", " ", "motion"),
        ("if on edge, bounce", " ", "motion"),
        ("x position", "r", "motion"),
        ("y position", "r", "motion"),
        ("direction", "r", "motion"),
        # looks
        ("say %s for %n secs", " ", "looks"),
        ("say %s", " ", "looks"),
        ("think %s for %n secs", " ", "looks"),
        ("think %s", " ", "looks"),
        ("show", " ", "looks"),
        ("hide", " ", "looks"),
        ("switch costume to %m.costume", " ", "looks"),
        ("next costume", " ", "looks"),
        ("next backdrop", " ", "looks"),
        ("switch backdrop to %m.backdrop", " ", "looks"),
        ("switch backdrop to %m.backdrop and wait", " ", "looks"),
        ("change %m.effect effect by %n", " ", "looks"),
        ("set %m.effect effect to %n", " ", "looks"),
        ("clear graphic effects", " ", "looks"),
        ("change size by %n", " ", "looks"),
        ("set size to %n%", " ", "looks"),
        ("go to front", " ", "looks"),
        ("go back %n layers", " ", "looks"),
        ("costume #", "r", "looks"),
        ("backdrop name", "r", "looks"),
        ("backdrop #", "r", "looks"),
        ("size", "r", "looks"),
        # obsolete looks blocks still found in old projects
        ("switch to costume %m.costume", " ", "looks"),
        ("next background", " ", "looks"),
        ("switch to background %m.backdrop", " ", "looks"),
        ("background #", "r", "looks"),
        # sound
        ("play sound %m.sound", " ", "sound"),
        ("play sound %m.sound until done", " ", "sound"),
        ("stop all sounds", " ", "sound"),
        ("play drum %d.drum for %n beats", " ", "sound"),
        ("rest for %n beats", " ", "sound"),
        ("play note %d.note for %n beats", " ", "sound"),
        ("set instrument to %d.instrument", " ", "sound"),
        ("change volume by %n", " ", "sound"),
        ("set volume to %n%", " ", "sound"),
        ("volume", "r", "sound"),
        ("change tempo by %n", " ", "sound"),
        ("set tempo to %n bpm", " ", "sound"),
        ("tempo", "r", "sound"),
        # pen
        ("clear", " ", "pen"),
        ("stamp", " ", "pen"),
        ("pen down", " ", "pen"),
        ("pen up", " ", "pen"),
        ("set pen color to %c", " ", "pen"),
        ("change pen color by %n", " ", "pen"),
        ("set pen color to %n", " ", "pen"),
        ("change pen shade by %n", " ", "pen"),
        ("set pen shade to %n", " ", "pen"),
        ("change pen size by %n", " ", "pen"),
        ("set pen size to %n", " ", "pen"),
        # data
        ("set %m.var to %s", " ", "variables"),
        ("change %m.var by %n", " ", "variables"),
        ("show variable %m.var", " ", "variables"),
        ("hide variable %m.var", " ", "variables"),
        ("add %s to %m.list", " ", "list"),
        ("delete %d.listDeleteItem of %m.list", " ", "list"),
        ("insert %s at %d.listItem of %m.list", " ", "list"),
        ("replace item %d.listItem of %m.list with %s", " ", "list"),
        ("item %d.listItem of %m.list", "r", "list"),
        ("length of %m.list", "r", "list"),
        ("%m.list contains %s?", "b", "list"),
        ("show list %m.list", " ", "list"),
        ("hide list %m.list", " ", "list"),
        # events
        ("when @greenFlag clicked", "h", "events"),
        ("when %m.key key pressed", "h", "events"),
        ("when this sprite clicked", "h", "events"),
        ("when backdrop switches to %m.backdrop", "h", "events"),
        ("when %m.triggerSensor > %n", "h", "events"),
        ("when I receive %m.broadcast", "h", "events"),
        ("broadcast %m.broadcast", " ", "events"),
        ("broadcast %m.broadcast and wait", " ", "events"),
        # control
        ("wait %n secs", " ", "control"),
        ("repeat %n", "c", "control"),
        ("forever", "cf", "control"),
        ("if %b then", "c", "control"),
        ("if %b then", "e", "control"),
        ("wait until %b", " ", "control"),
        ("repeat until %b", "c", "control"),
        ("stop %m.stop", "f", "control"),
        ("when I start as a clone", "h", "control"),
        ("create clone of %m.spriteOnly", " ", "control"),
        ("delete this clone", "f", "control"),
        ("else", "else", "control"),
        ("end", "end", "control"),
        (". . .", " ", "grey"),
        ("…", " ", "grey"),
        ("...", " ", "grey"),
        # obsolete control blocks
        ("if %b", "c", "control"),
        ("forever if %b", "cf", "control"),
        ("stop script", "f", "control"),
        ("stop all", "f", "control"),
        # sensing
        ("touching %m.touching?", "b", "sensing"),
        ("touching color %c?", "b", "sensing"),
        ("color %c is touching %c?", "b", "sensing"),
        ("distance to %m.spriteOrMouse", "r", "sensing"),
        ("ask %s and wait", " ", "sensing"),
        ("answer", "r", "sensing"),
        ("key %m.key pressed?", "b", "sensing"),
        ("mouse down?", "b", "sensing"),
        ("mouse x", "r", "sensing"),
        ("mouse y", "r", "sensing"),
        ("loudness", "r", "sensing"),
        ("loud?", "b", "sensing"),
        ("video %m.videoMotionType on %m.stageOrThis", "r", "sensing"),
        ("turn video %m.videoState", " ", "sensing"),
        ("set video transparency to %n%", " ", "sensing"),
        ("timer", "r", "sensing"),
        ("reset timer", " ", "sensing"),
        ("%m.attribute of %m.spriteOrStage", "r", "sensing"),
        ("current %m.timeAndDate", "r", "sensing"),
        ("days since 2000", "r", "sensing"),
        ("username", "r", "sensing"),
        ("user id", "r", "sensing"),
        # operators
        ("%n + %n", "r", "operators"),
        ("%n - %n", "r", "operators"),
        ("%n * %n", "r", "operators"),
        ("%n / %n", "r", "operators"),
        ("pick random %n to %n", "r", "operators"),
        ("%s < %s", "b", "operators"),
        ("%s = %s", "b", "operators"),
        ("%s > %s", "b", "operators"),
        ("%b and %b", "b", "operators"),
        ("%b or %b", "b", "operators"),
        ("not %b", "b", "operators"),
        ("join %s %s", "r", "operators"),
        ("letter %n of %s", "r", "operators"),
        ("length of %s", "r", "operators"),
        ("%n mod %n", "r", "operators"),
        ("round %n", "r", "operators"),
        ("%m.mathOp of %n", "r", "operators"),
        # custom blocks
        ("%n @addInput", "ring", "custom-arg"),
        # extensions
        ("when distance < %n", "h", "extension"),
        ("when tilted", "h", "extension"),
        ("tilt %m.xxx", "r", "extension"),
        ("turn %m.motor on for %n seconds", " ", "extension"),
        ("set light color to %n", " ", "extension"),
        ("play note %n for %n seconds", " ", "extension"),
    )
)
