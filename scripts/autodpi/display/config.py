class DisplayConfig:
    # Mapping file, resolved against the working directory
    DPI_FILE_NAME = "./dpi.yaml"

    # Seconds between two xrandr polls
    POLL_INTERVAL = 3.0

    # Display query
    XRANDR_COMMAND = ("xrandr",)
    PRIMARY_MARKER = " connected primary "
    RESOLUTION_FIELD = 3

    # Font DPI setting
    XFCONF_COMMAND = "xfconf-query"
    XFCONF_CHANNEL = "xsettings"
    XFCONF_DPI_PROPERTY = "/Xft/DPI"
    NO_CUSTOM_DPI = -1
