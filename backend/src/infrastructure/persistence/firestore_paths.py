"""
Firestore collection names.

Layout:
    users/{userId}
    users/{userId}/friends/{friendUserId}
    users/{userId}/dm_wrapper/{channelId}
    dm_channels/{channelId}
    projects/{projectId}
"""


class FirestorePaths:
    USERS = "users"
    FRIENDS = "friends"
    DM_WRAPPER = "dm_wrapper"
    DM_CHANNELS = "dm_channels"
    PROJECTS = "projects"
