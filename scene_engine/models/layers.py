# Compositing layers. Higher layers paint later and occlude lower ones.
LAYER_SCREEN = 0
LAYER_FILE = 10
LAYER_APP = 20
LAYER_DOCK = 30
LAYER_TASKBAR = 30
LAYER_MENUBAR = 40
LAYER_NOTIFICATION = 50
