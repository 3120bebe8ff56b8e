"""Colors and sizes of the two desktop families, keyed by appearance where they differ."""
from .models.enums import Appearance

DARK, LIGHT = Appearance.DARK, Appearance.LIGHT

FONT_COLOR = {DARK: '#ffffff', LIGHT: '#000000'}
BLUR_SIZE = 20

# Mac
MAC_APP_BORDER = {DARK: '#787878', LIGHT: '#d2d2d2'}
MAC_CLOSE_COLOR = '#fa4d4d'
MAC_MINIMIZE_COLOR = '#fab83d'
MAC_MAXIMIZE_COLOR = '#2bc948'
MAC_INACTIVE_COLOR = {DARK: '#585858', LIGHT: '#d7d7d7'}
MAC_HANDLEBAR_START = {DARK: '#3a3a3a', LIGHT: '#e0e0e0'}
MAC_HANDLEBAR_STOP = {DARK: '#303030', LIGHT: '#c8c8c8'}
MAC_HANDLEBAR_INACTIVE = {DARK: '#282828', LIGHT: '#f5f5f5'}
MAC_DOCK = {DARK: '#000000a0', LIGHT: '#ffffffd0'}
MAC_DOCK_BORDER = {DARK: '#646464', LIGHT: '#00000000'}
MAC_ACTIVITY = {DARK: '#ffffff50', LIGHT: '#000000'}
MAC_MENUBAR = MAC_DOCK
MAC_MENUBAR_BORDER = {DARK: '#0a0a0a80', LIGHT: '#00000000'}
MENUBAR_HEIGHT = 24

# Windows
WIN_APP_BORDER = '#ffffff'
WIN_HANDLEBAR = {DARK: '#202020', LIGHT: '#ffffff'}
WIN_CLOSE_COLOR = '#da3030'
WIN_BUTTON_HOVER = {DARK: '#ffffff16', LIGHT: '#00000016'}
WIN_TASKBAR = '#000000c0'
WIN_ACTIVITY = '#76b9ed'
WIN_NOTIFICATION = '#202020'

# Window content
CONTENT_BACKGROUND = {DARK: '#242424', LIGHT: '#fafafa'}
CONTENT_DIVIDER = {DARK: '#323232', LIGHT: '#dfdfdf'}
CONTENT_SIDEBAR = {DARK: '#1c1c1c', LIGHT: '#f0f0f0'}
HIGHLIGHT_COLOR = {DARK: '#c88d2d', LIGHT: '#fdde8c'}
