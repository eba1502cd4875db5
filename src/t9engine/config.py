import os

# Corpus reading
CORPUS_ENCODING: str = "utf-8"
INCLUDE_EXTS = [".txt"]                 # file types picked up when a directory is given
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# Progress logging (set T9_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("T9_VERBOSE") == "1"
PROGRESS_EVERY_LINES: int = 10_000

# Shown when a query has no exact or no prefix matches
NO_MATCHES: str = "[None was found]"

# Flask UI
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = 8000
