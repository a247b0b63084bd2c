"""
Default category tables.

CATEGORY_EXTENSIONS is the only place where file types are added or removed;
the canonical folder names, the extension lookup and the alias lookup are all
derived from these two tables by CategoryConfig.

Rules:
    - extensions are lowercase and carry no leading dot
    - aliases are lowercase folder names
    - an alias belongs to exactly one category and is never a canonical name
"""

from typing import Dict, Set

OTHERS_CATEGORY = "Others"

CATEGORY_EXTENSIONS: Dict[str, Set[str]] = {
    # Media
    "Image Files": {
        "jpg", "jpeg", "png", "gif", "bmp", "webp", "tiff", "svg", "ico", "heic",
    },
    "Video Files": {
        "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "mpeg", "mpg", "3gp", "m4v",
    },
    "Audio Files": {
        "mp3", "wav", "aac", "flac", "ogg", "m4a", "wma", "opus", "aiff",
    },
    # Documents
    "Text Files": {"txt", "md", "log", "rtf", "nfo"},
    "PDF Files": {"pdf"},
    "Word Files": {"doc", "docx"},
    "Excel Files": {"xls", "xlsx"},
    "PowerPoint Files": {"ppt", "pptx"},
    # Source code
    "C Files": {"c"},
    "C++ Files": {"cpp", "cc", "cxx"},
    "Header Files": {"h", "hpp", "hh", "hxx"},
    "Java Files": {"java"},
    "Python Files": {"py"},
    "JavaScript Files": {"js"},
    "TypeScript Files": {"ts"},
    "Web Files": {"html", "css", "scss"},
    "Shell Scripts": {"sh"},
    "Go Files": {"go"},
    "Rust Files": {"rs"},
    "PHP Files": {"php"},
    # Data and binaries
    "Data Files": {"csv", "json", "xml", "yaml", "yml"},
    "Database Files": {"sql", "db", "sqlite", "sqlite3", "mdb"},
    "Archive Files": {"zip", "rar", "7z", "tar", "gz", "bz2", "xz", "tgz"},
    "Executable Files": {"exe", "msi", "bin", "app", "apk"},
    "Library Files": {"dll", "so", "dylib", "a", "lib"},
    "Config Files": {"ini", "conf", "cfg", "env"},
}  # fmt: skip

CATEGORY_ALIASES: Dict[str, Set[str]] = {
    "Image Files": {
        "img", "imgs", "image", "images", "pic", "pics", "picture", "pictures",
        "photo", "photos", "photography", "camera", "camera roll", "gallery",
        "photo gallery", "screenshots", "wallpapers", "backgrounds", "portraits",
        "landscapes", "selfies", "family photos", "vacation photos",
        "travel photos", "event photos", "wedding photos", "birthday photos",
        "nature photos", "street photos", "raw images", "edited photos",
        "final images", "scans", "prints", "artwork", "illustrations",
        "graphics", "icons", "logos", "thumbnails", "references", "inspiration",
        "concept art",
    },
    "Video Files": {
        "video", "videos", "vid", "vids", "movie", "movies", "films", "clips",
        "recordings", "lectures", "screen captures", "tutorial videos",
        "courses", "vlogs", "reels", "shorts", "vacation videos",
        "travel videos", "family videos", "event videos", "wedding videos",
        "gameplay", "walkthroughs", "streams", "webinars", "meetings recordings",
        "interviews", "trailers", "screen recordings", "edits", "final cuts",
        "raw footage", "b roll", "montage", "highlights", "dashcam", "timelapse",
        "slow motion", "drone footage",
    },
    # "recordings" is claimed by Video Files above
    "Audio Files": {
        "audio", "audios", "music", "songs", "tracks", "albums", "playlist",
        "playlists", "podcast", "podcasts", "audiobooks", "voice notes",
        "voice recordings", "lectures audio", "interviews audio", "sfx",
        "meetings audio", "sound effects", "background music", "instrumentals",
        "beats", "loops", "samples", "live recordings", "concerts", "practice",
        "rehearsals", "demos", "draft mixes", "final mixes", "masters",
        "exports", "ringtones", "notifications", "alarms", "ambient sounds",
        "nature sounds",
    },
    "Text Files": {
        "text", "texts", "text files", "txt files", "notes", "plain text",
        "logs", "markdown", "readme", "documentation", "draft notes",
    },
    "PDF Files": {
        "pdf", "pdfs", "pdf files", "documents pdf", "manuals pdf", "ebooks",
        "reports pdf", "invoices pdf", "statements pdf", "scanned pdfs",
    },
    "Word Files": {
        "word", "word files", "documents word", "doc files", "docx files",
        "letters", "reports word", "essays", "assignments", "resumes",
        "cover letters",
    },
    "Excel Files": {
        "excel", "excel files", "spreadsheets", "sheets", "financial sheets",
        "budgets", "expenses", "accounts", "tracking sheets", "reports excel",
        "tables",
    },
    "PowerPoint Files": {
        "powerpoint", "powerpoint files", "presentations", "slides",
        "ppt files", "pptx files", "pitch decks", "lecture slides",
        "meeting slides",
    },
    "C Files": {"c", "c files", "c source", "c language", "c programs"},
    "C++ Files": {
        "cpp", "c++", "cplusplus", "cpp files", "c++ source", "c++ programs",
    },
    "Java Files": {"java", "java files", "java source", "java programs"},
    "Python Files": {
        "python", "python files", "python source", "py scripts",
        "python programs", "python scripts",
    },
    "JavaScript Files": {"javascript", "javascript files", "js files", "js source"},
    "TypeScript Files": {"typescript", "typescript files", "ts files", "ts source"},
    "Web Files": {
        "web", "web files", "html files", "css files", "frontend",
        "frontend files",
    },
    "Shell Scripts": {"shell", "shell scripts", "bash scripts", "terminal scripts"},
    "Go Files": {"go", "golang", "go files", "go source", "go programs"},
    "Rust Files": {
        "rust", "rust files", "rust source", "rs files", "rust programs",
    },
    "PHP Files": {"php", "php files", "php source", "php scripts"},
    "Database Files": {
        "database", "databases", "db", "db files", "sqlite", "sql files",
    },
    "Archive Files": {
        "archive", "archives", "compressed", "compressed files", "zip files",
        "rar files", "backups", "backup archives",
    },
    "Executable Files": {
        "executables", "binaries", "apps", "applications", "programs",
        "installers",
    },
    "Library Files": {"libraries", "libs", "shared libraries", "static libraries"},
    "Config Files": {
        "config", "configs", "configuration", "settings", "env files",
        "environment config",
    },
}  # fmt: skip
