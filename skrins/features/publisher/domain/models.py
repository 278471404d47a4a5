# Fixed identity of the desktop notification
APP_NAME = "Skrins"
NOTIFICATION_TITLE = "Screenshot uploaded!"
