# Text pools the skins draw random strings from

APP_NAMES = [
    'Finder', 'Safari', 'Mail', 'Notes', 'Preview', 'Terminal', 'Calendar',
    'Music', 'Photos', 'Word', 'Excel', 'PowerPoint', 'Code', 'Slack',
]

MENU_NAMES = ['File', 'Edit', 'Selection', 'View', 'Window', 'Help']

FILE_NAMES = [
    'Report', 'Invoice 2023', 'Screenshot', 'Notes', 'Budget', 'Project',
    'Holiday', 'Untitled', 'Presentation', 'Draft', 'Archive', 'Photos',
    'Resume', 'Meeting Minutes', 'Backup', 'Downloads', 'Thesis', 'Design',
]

FILE_EXTENSIONS = ['.pdf', '.docx', '.xlsx', '.png', '.jpg', '.txt', '.zip', '.pptx', '.mp4']

BUTTON_TEXTS = [
    'Open', 'Close', 'Reply', 'Later', 'Snooze', 'Accept', 'Decline',
    'Show', 'Install', 'Details', 'OK', 'Dismiss',
]

LOREM_IPSUM = [
    'Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore',
    'Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo',
    'Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla',
    'Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim',
    'Sed ut perspiciatis unde omnis iste natus error sit voluptatem accusantium doloremque laudantium',
    'Nemo enim ipsam voluptatem quia voluptas sit aspernatur aut odit aut fugit, sed quia consequuntur',
]

DOMAINS = [
    'google.com', 'wikipedia.org', 'github.com', 'youtube.com', 'news.ycombinator.com',
    'stackoverflow.com', 'reddit.com', 'amazon.com', 'bbc.co.uk', 'nytimes.com',
    'python.org', 'mozilla.org', 'apple.com', 'microsoft.com', 'weather.com',
]
