"""Application configuration constants.

Central location for all configurable values used throughout the application.
"""

# =============================================================================
# Camera
# =============================================================================

CAMERA_FOV = 75.0         # Vertical field of view in degrees
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_DISTANCE = 5.0     # Distance along the view axis (camera.position.z)

# =============================================================================
# Scene Content
# =============================================================================

CUBE_SIZE = 1.0
CUBE_COLOR = "#00ffff"    # Cyan wireframe
CUBE_LINE_WIDTH = 1.0

# Rotation added to the cube on the x and y axes every frame (radians).
# Frame-count driven: at the nominal frame rate this is ~0.6 rad/s.
ROTATION_STEP = 0.01

# =============================================================================
# Frame Clock
# =============================================================================

TARGET_FPS = 60
FRAME_INTERVAL_MS = int(1000 / TARGET_FPS)  # Tk after() delay between frames

# =============================================================================
# Renderer
# =============================================================================

RENDERER_ALPHA = True       # Canvas takes the mount's background color
RENDERER_ANTIALIAS = True   # Round caps/joins on wireframe lines
VIEWPORT_BG = "#ffffff"     # Page background behind the viewport

# =============================================================================
# Chat
# =============================================================================

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7

# Mode passed to the backend's response call
RESPONSE_MODE = "classify"

# Per-mode sampling temperature for the OpenAI backend
RESPONSE_MODE_TEMPERATURES = {
    "classify": 0.2,
    "chat": 0.7,
    "creative": 1.0,
}

# =============================================================================
# API Configuration
# =============================================================================

API_TIMEOUT_SECONDS = 60
API_CONNECT_TIMEOUT_SECONDS = 10
API_MAX_RETRIES = 2  # Transport-level retries inside the OpenAI client

# =============================================================================
# Logging
# =============================================================================

LOG_FILE_NAME = "cubechat.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB per log file
LOG_BACKUP_COUNT = 5  # Number of backup files to keep

# =============================================================================
# Keyring (Secure Credential Storage)
# =============================================================================

KEYRING_SERVICE = "CubeChat"
KEYRING_USERNAME = "openai_api_key"
API_KEY_ENV_VAR = "OPENAI_API_KEY"

# =============================================================================
# UI Configuration
# =============================================================================

WINDOW_TITLE = "Cube Chat"
WINDOW_MIN_WIDTH = 640
WINDOW_MIN_HEIGHT = 480
WINDOW_DEFAULT_WIDTH = 1280
WINDOW_DEFAULT_HEIGHT = 800
CHAT_PANEL_WIDTH = 360

OVERLAY_TEXT = "Hello World"
