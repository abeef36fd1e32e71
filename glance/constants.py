"""Constants and configuration defaults for the glance viewer."""

class ViewerConstants:
    """Central configuration constants for the viewer."""

    # Drawing
    FILLER_MARKER = "~"  # Drawn on rows past the end of the content
    GOODBYE_MESSAGE = "Goodbye."  # Sole output of the final frame
    STATUS_BAR = True  # Reserve the bottom row for the status bar
    NO_NAME = "[No Name]"  # Status bar label for unnamed content

    # Settings file
    APP_NAME = "glance"
    SETTINGS_FILENAME = "settings.json"

    # Todo board
    TODO_HEADER = "[TODO]  DONE "
    DONE_HEADER = " TODO  [DONE]"
    TODO_ITEM_PREFIX = "- [ ] "
    DONE_ITEM_PREFIX = "- [x] "
