"""
Frequently used application-wide constants.
"""


class AppConstants:
    """Static application constants."""
    PORTAL_NAME = "I.T. Samadhan"
    IS_DEV_ENV = "IsDevEnv"
    SESSION_LOGGED_IN_USER_DATA = "LoggedInUserData"
