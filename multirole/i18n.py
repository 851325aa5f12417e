"""Server messages.

Names starting with ``CLIENT_`` are sent to connected clients; the rest
are written to the server logs.
"""

GIT_REPO_PATH_IS_NOT_DIR = "Repository path is not a directory."
GIT_REPO_DOES_NOT_EXIST = "Repository does not exist, cloning..."
GIT_REPO_EXISTS = "Repository exists! Opening..."
GIT_REPO_CHECKING_UPDATES = "Checking for updates..."
GIT_REPO_UPDATE_COMPLETED = "Update completed!"
GIT_REPO_WEBHOOK_TRIGGERED = "Webhook triggered."
GIT_REPO_WEBHOOK_NO_TOKEN = "Webhook payload does not have a token."
GIT_REPO_FINISHED_UPDATING = "Finished updating."
GIT_REPO_UPDATE_EXCEPT = "Exception occurred while updating repo: {0}"
GIT_REPO_CLONING_COMPLETED = "Cloning completed!"

MULTIROLE_INCORRECT_CORE_TYPE = "Incorrect type of core."
MULTIROLE_ADDING_REPO = "Adding repository '{0}'..."
MULTIROLE_SETUP_SIGNAL = "Setting up signal handling..."
MULTIROLE_SIGNAL_RECEIVED = "SIGTERM received."
MULTIROLE_HOSTING_THREADS_NUM = "Hosting will use {0} threads."
MULTIROLE_INIT_SUCCESS = "Initialization finished successfully!"
MULTIROLE_GOODBYE = "Good bye!"
MULTIROLE_CLEANING_UP = "Closing acceptors and repositories..."
MULTIROLE_REMAINING_ROOMS = "Rooms that were not closed: {0}"

MAIN_SERVER_INIT_FAILURE = "Could not initialize server: {0}\n"

DLWRAPPER_EXCEPT_CREATE_DUEL = "OCG_CreateDuel failed!"

# HWRAPPER: the out-of-process core wrapper.
HWRAPPER_UNABLE_TO_LAUNCH = "Unable to launch child."
HWRAPPER_HEARTBEAT_FAILURE = "Heartbeat failed."
HWRAPPER_EXCEPT_CREATE_DUEL = DLWRAPPER_EXCEPT_CREATE_DUEL
HWRAPPER_EXCEPT_MAX_LOOP_COUNT = "Max loop count reached."
HWRAPPER_EXCEPT_PROC_CRASHED = "Process is not running."
HWRAPPER_EXCEPT_PROC_UNRESPONSIVE = "Process is unresponsive."

CLIENT_ROOM_HOSTING_INVALID_NAME = "Invalid name. Try filling in your name!"
CLIENT_ROOM_HOSTING_NOT_FOUND = "Room not found. Try refreshing the list!"
CLIENT_ROOM_HOSTING_INVALID_MSG = (
    "Invalid message before connecting to a room. Please report this error!"
)
CLIENT_ROOM_HOSTING_KICKED_BEFORE = (
    "Unable to join. You were kicked from this room before."
)
CLIENT_ROOM_HOSTING_CANNOT_RESOLVE_IP = (
    "Error resolving your IP address. Try again later."
)
CLIENT_ROOM_HOSTING_MAX_CONNECTION_REACHED = (
    "You have too many connections open. Close some of them."
)
CLIENT_ROOM_HOSTING_NO_PLAYER_INFO_SENT = (
    "Tried to host or join a room without sending player information first."
)

CLIENT_ROOM_MSG_RETRY_ERROR = (
    "Error while processing your response. Make sure you have the latest client."
)

ROOM_DUELING_CORE_EXCEPT_CREATION = "Core exception at creation: {0}"
ROOM_DUELING_CORE_EXCEPT_EXTRA_CARDS = "Core exception at extra cards addition: {0}"
ROOM_DUELING_CORE_EXCEPT_STARTING = "Core exception at starting: {0}"
ROOM_DUELING_CORE_EXCEPT_RESPONSE = "Core exception at response setting: {0}"
ROOM_DUELING_CORE_EXCEPT_PROCESSING = "Core exception at processing: {0}"
ROOM_DUELING_CORE_EXCEPT_DESTRUCTOR = "Core exception at destruction: {0}"
ROOM_DUELING_MSG_RETRY_RECEIVED = "MSG_RETRY received from core."
CLIENT_ROOM_REPLAY_TOO_BIG = (
    "Unable to send replay, its size exceeds the maximum capacity."
)
CLIENT_ROOM_CORE_EXCEPT = (
    "Internal scripting engine error! This incident has been reported."
)

SCRIPT_LOGGER_USER_MSG = "User debug message: "

CLIENT_ROOM_KICKED = "{0} has been kicked."

BANLIST_PROVIDER_LOADING_ONE = "Loading up {0}..."
BANLIST_PROVIDER_COULD_NOT_LOAD_ONE = "Could not load banlist: {0}"

CORE_PROVIDER_COULD_NOT_CREATE_TMP_DIR = "CoreProvider: Could not create temporary directory."
CORE_PROVIDER_PATH_IS_FILE_NOT_DIR = "CoreProvider: Temporary directory path points to a file."
CORE_PROVIDER_WRONG_CORE_TYPE = "CoreProvider: No other core type is implemented."
CORE_PROVIDER_CORE_NOT_FOUND_IN_REPO = "CoreProvider: Core not found in repository!"
CORE_PROVIDER_COPYING_CORE_FILE = "Copying core from '{0}' to '{1}'..."
CORE_PROVIDER_FAILED_TO_COPY_CORE_FILE = "Failed to copy core file! Re-testing old one."
CORE_PROVIDER_VERSION_REPORTED = "Version reported by core: {0}.{1}"
CORE_PROVIDER_ERROR_WHILE_TESTING = "Error while testing core '{0}': {1}"

DATA_PROVIDER_LOADING_ONE = BANLIST_PROVIDER_LOADING_ONE
DATA_PROVIDER_COULD_NOT_MERGE = "Could not merge database."

ROOM_LOGGER_ROOM_NOTES = 'Room Notes = "{0}"'
ROOM_LOGGER_ROOM_HOST = "Room Host = {0}({1})"
ROOM_LOGGER_IS_PRIVATE = "Room is private, not logging anything else."
ROOM_LOGGER_CHAT = "{0}({1}): {2}"

LOG_HANDLER_COULD_NOT_CREATE_DIR = "LogHandler: Could not create room logging directory."
LOG_HANDLER_PATH_IS_FILE_NOT_DIR = "LogHandler: Room logging directory path points to a file."
LOG_HANDLER_CANNOT_CREATE_ROOM_LOGGER = "Unable to create RoomLogger: {0}"

ROOM_LOGGER_FILE_IS_NOT_OPEN = "File is not open."

# DWH: the Discord webhook log sink.
DWH_URI_COLON_NOT_FOUND = "URI scheme colon separator not found."
DWH_URI_TOO_SHORT = "URI length unexpectedly short."
DWH_URI_NO_PATH = "URI has no path."
DWH_ERROR_RESOLVING_HOST = "Resolving host yielded no endpoints."
DWH_SERVICE_MESSAGE_TITLE = "Service Message"
DWH_RIDFORMAT_ERROR = (
    "\n**¡¡¡ERROR FORMATTING TEXT!!!** Check your `ridFormat` format string."
)

REPLAY_MANAGER_NOT_SAVING_REPLAYS = "Not saving replays, replay IDs will always be 0"
REPLAY_MANAGER_COULD_NOT_CREATE_DIR = "ReplayManager: Could not create replay directory."
REPLAY_MANAGER_PATH_IS_FILE_NOT_DIR = "ReplayManager: Replay directory path points to a file."
REPLAY_MANAGER_ERROR_WRITING_INITIAL_ID = "ReplayManager: Unable to write initial ID!"
REPLAY_MANAGER_ERROR_CREATING_LOCK = "ReplayManager: Unable to create lastId lock file"
REPLAY_MANAGER_CURRENT_ID = "Current ID is {0}."
REPLAY_MANAGER_LASTID_SIZE_CORRUPTED = (
    "lastId file byte size corrupted: It's {0}. Should be {1}."
)
REPLAY_MANAGER_UNABLE_TO_SAVE = "Unable to save replay {0}."
REPLAY_MANAGER_CANNOT_OPEN_LASTID = "lastId cannot be opened for reading."
REPLAY_MANAGER_CANNOT_WRITE_ID = "Unable to write next replay ID to file."

SCRIPT_PROVIDER_LOADING_FILES = "Loading {0} files..."
SCRIPT_PROVIDER_COULD_NOT_OPEN = "Could not open file {0}."
SCRIPT_PROVIDER_TOTAL_FILES_LOADED = "Loaded {0} files."