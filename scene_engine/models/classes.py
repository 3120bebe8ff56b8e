from typing import Dict, List

from .enums import UIFamily

FILE = 'file'
DOCK = 'dock'
TASKBAR = 'taskbar'
MENUBAR = 'menubar'
NOTIFICATION = 'notification'
APPLICATION = 'application'
FILE_EXPLORER = 'fileexplorer'
NAVBAR = 'navbar'
TABBAR = 'tabbar'
FAVORITEBAR = 'favoritebar'
AUTOCOMPLETE = 'autocomplete'

# Static class lists; index = class id in normalized labels
MAC_CLASSES: List[str] = [
    FILE, DOCK, MENUBAR, NOTIFICATION, APPLICATION, FILE_EXPLORER,
    NAVBAR, TABBAR, FAVORITEBAR, AUTOCOMPLETE,
]

WIN_CLASSES: List[str] = [
    FILE, TASKBAR, NOTIFICATION, APPLICATION, FILE_EXPLORER,
    NAVBAR, TABBAR, FAVORITEBAR, AUTOCOMPLETE,
]

FAMILY_CLASSES: Dict[UIFamily, List[str]] = {
    UIFamily.MAC: MAC_CLASSES,
    UIFamily.WINDOWS: WIN_CLASSES,
}
