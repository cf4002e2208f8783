# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import uuid
from enum import IntEnum

# Every command routed through the host carries a command group GUID and a numeric
# id. The id only means something relative to its group. We care about exactly two
# groups: the legacy standard command set (97) and the editor command set (2K).
# The numeric values come from stdidcmd.h in the host SDK and must match it exactly.

GUID_VSStandardCommandSet97 = uuid.UUID("5efc7975-14bc-11cf-9b2b-00aa00573819")
VSStd2K = uuid.UUID("1496a755-94de-11d0-8c3f-00c04fc2aae2")


# Only the low end of the legacy set is listed in full; past that we list only the
# commands which carry keyboard meaning.
class VSStd97CmdID(IntEnum):
    AlignBottom = 1
    AlignHorizontalCenters = 2
    AlignLeft = 3
    AlignRight = 4
    AlignToGrid = 5
    AlignTop = 6
    AlignVerticalCenters = 7
    ArrangeBottom = 8
    ArrangeRight = 9
    BringForward = 10
    BringToFront = 11
    CenterHorizontally = 12
    CenterVertically = 13
    Code = 14
    Copy = 15
    Cut = 16
    Delete = 17
    FontName = 18
    FontSize = 19
    Group = 20
    HorizSpaceConcatenate = 21
    HorizSpaceDecrease = 22
    HorizSpaceIncrease = 23
    HorizSpaceMakeEqual = 24
    InsertObject = 25
    Paste = 26
    Print = 27
    Properties = 28
    Redo = 29
    # Undo/redo dropdown: the variant is empty for a plain button press, and holds
    # the chosen history depth when the user picked an entry from the list.
    MultiLevelRedo = 30
    SelectAll = 31
    SendBackward = 32
    SendToBack = 33
    ShowTable = 34
    SizeToControl = 35
    SizeToControlHeight = 36
    SizeToControlWidth = 37
    SizeToFit = 38
    SizeToGrid = 39
    SnapToGrid = 40
    TabOrder = 41
    Toolbox = 42
    Undo = 43
    MultiLevelUndo = 44
    # A single typed character; the variant holds the UTF-16 code unit.
    SingleChar = 310
    F1Help = 311
    Escape = 331


class VSStd2KCmdID(IntEnum):
    # The variant holds the UTF-16 code unit of the typed character.
    TYPECHAR = 1
    BACKSPACE = 2
    RETURN = 3
    TAB = 4
    BACKTAB = 5
    DELETE = 6
    # Every movement command comes in a plain form and an _EXT form, which extends
    # the selection. Some also have an _EXT_COL form, which extends a box selection.
    LEFT = 7
    LEFT_EXT = 8
    RIGHT = 9
    RIGHT_EXT = 10
    UP = 11
    UP_EXT = 12
    DOWN = 13
    DOWN_EXT = 14
    # The Home and End keys are delivered as BOL and EOL, not as HOME and END.
    HOME = 15
    HOME_EXT = 16
    END = 17
    END_EXT = 18
    BOL = 19
    BOL_EXT = 20
    FIRSTCHAR = 21
    FIRSTCHAR_EXT = 22
    EOL = 23
    EOL_EXT = 24
    LASTCHAR = 25
    LASTCHAR_EXT = 26
    PAGEUP = 27
    PAGEUP_EXT = 28
    PAGEDN = 29
    PAGEDN_EXT = 30
    TOPLINE = 31
    TOPLINE_EXT = 32
    BOTTOMLINE = 33
    BOTTOMLINE_EXT = 34
    SCROLLUP = 35
    SCROLLDN = 36
    SCROLLPAGEUP = 37
    SCROLLPAGEDN = 38
    SCROLLLEFT = 39
    SCROLLRIGHT = 40
    SCROLLBOTTOM = 41
    SCROLLCENTER = 42
    SCROLLTOP = 43
    SELECTALL = 44
    SELTABIFY = 45
    SELUNTABIFY = 46
    SELLOWCASE = 47
    SELUPCASE = 48
    SELTOGGLECASE = 49
    SELTITLECASE = 50
    SELSWAPANCHOR = 51
    GOTOLINE = 52
    GOTOBRACE = 53
    GOTOBRACE_EXT = 54
    GOBACK = 55
    SELECTMODE = 56
    # Overtype mode is what the host calls the state toggled by the Insert key.
    TOGGLE_OVERTYPE_MODE = 57
    CUT = 58
    COPY = 59
    PASTE = 60
    CUTLINE = 61
    DELETELINE = 62
    DELETEBLANKLINES = 63
    DELETEWHITESPACE = 64
    DELETETOEOL = 65
    DELETETOBOL = 66
    OPENLINEABOVE = 67
    OPENLINEBELOW = 68
    INDENT = 69
    UNINDENT = 70
    UNDO = 71
    UNDONOMOVE = 72
    REDO = 73
    REDONOMOVE = 74
    CANCEL = 103
    LEFT_EXT_COL = 150
    RIGHT_EXT_COL = 151
    UP_EXT_COL = 152
    DOWN_EXT_COL = 153
    TOGGLEWORDWRAP = 154
    ISEARCH = 155
    ISEARCHBACK = 156
    BOL_EXT_COL = 157
    EOL_EXT_COL = 158
    WORDPREV_EXT_COL = 159
    WORDNEXT_EXT_COL = 160


COMMAND_GROUPS: dict[uuid.UUID, type[IntEnum]] = {
    GUID_VSStandardCommandSet97: VSStd97CmdID,
    VSStd2K: VSStd2KCmdID,
}
