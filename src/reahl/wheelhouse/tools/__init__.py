from reahl.wheelhouse.tools import common
from reahl.wheelhouse.tools import dialogs
from reahl.wheelhouse.tools import files
from reahl.wheelhouse.tools import keyboard
from reahl.wheelhouse.tools import navigate
from reahl.wheelhouse.tools import pdf
from reahl.wheelhouse.tools import screenshot
from reahl.wheelhouse.tools import snapshot
from reahl.wheelhouse.tools import tabs
from reahl.wheelhouse.tools import vision


snapshot_tools = [
    *navigate.tools(capture_snapshot=True),
    *common.tools(capture_snapshot=True),
    *keyboard.tools(capture_snapshot=True),
    *dialogs.tools(capture_snapshot=True),
    *files.tools(capture_snapshot=True),
    *snapshot.tools(),
    *screenshot.tools(),
    *tabs.tools(capture_snapshot=True),
    *pdf.tools(),
    common.close(),
]

vision_tools = [
    *navigate.tools(capture_snapshot=False),
    *common.tools(capture_snapshot=False),
    *keyboard.tools(capture_snapshot=False),
    *dialogs.tools(capture_snapshot=False),
    *files.tools(capture_snapshot=False),
    *vision.tools(),
    *tabs.tools(capture_snapshot=False),
    *pdf.tools(),
    common.close(),
]
