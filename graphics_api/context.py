"""
Context-based graphics selection.

Maps storyline words (actions, subjects, emotions, settings) to concrete
icon names, and scene words to illustration themes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union

from graphics_api.models import StoryContext

DEFAULT_THEME = "business"

_ACTIONS: Dict[str, Tuple[str, ...]] = {
    "send": ("arrow-right", "send", "paper-plane", "mail"),
    "receive": ("arrow-left", "inbox", "download"),
    "upload": ("upload", "cloud-upload", "arrow-up"),
    "download": ("download", "cloud-download", "arrow-down"),
    "pay": ("credit-card", "wallet", "money", "dollar-sign"),
    "buy": ("shopping-cart", "bag", "credit-card"),
    "search": ("magnifying-glass", "search", "zoom-in"),
    "login": ("log-in", "user", "key", "lock"),
    "logout": ("log-out", "door-open", "exit"),
    "share": ("share", "share-2", "external-link"),
    "like": ("heart", "thumbs-up", "star"),
    "save": ("bookmark", "heart", "save", "floppy-disk"),
    "delete": ("trash", "x", "trash-2"),
    "edit": ("pencil", "edit", "pen"),
    "add": ("plus", "plus-circle", "add"),
    "remove": ("minus", "x", "trash"),
    "sync": ("refresh", "sync", "arrows-clockwise"),
    "connect": ("link", "plug", "wifi"),
    "disconnect": ("unlink", "plug-off", "wifi-off"),
    "approve": ("check", "check-circle", "thumbs-up"),
    "reject": ("x", "x-circle", "thumbs-down"),
    "celebrate": ("party", "confetti", "trophy", "star"),
    "work": ("briefcase", "laptop", "desktop"),
    "code": ("code", "terminal", "brackets"),
    "build": ("hammer", "wrench", "tool"),
    "deploy": ("rocket", "cloud", "server"),
    "secure": ("lock", "shield", "key"),
}

_SUBJECTS: Dict[str, Tuple[str, ...]] = {
    "user": ("user", "person", "avatar"),
    "team": ("users", "people", "group"),
    "money": ("dollar-sign", "wallet", "credit-card", "coins"),
    "payment": ("credit-card", "wallet", "bank"),
    "message": ("message-circle", "chat", "envelope", "mail"),
    "email": ("envelope", "mail", "at-sign"),
    "notification": ("bell", "alert", "notification"),
    "settings": ("gear", "settings", "sliders"),
    "file": ("file", "document", "file-text"),
    "folder": ("folder", "folder-open"),
    "image": ("image", "photo", "camera"),
    "video": ("video", "play", "film"),
    "audio": ("volume", "speaker", "headphones"),
    "calendar": ("calendar", "clock", "schedule"),
    "location": ("map-pin", "location", "globe"),
    "chart": ("chart", "bar-chart", "trending-up"),
    "database": ("database", "server", "hard-drive"),
    "api": ("code", "plug", "layers"),
    "security": ("shield", "lock", "key"),
    "success": ("check", "trophy", "star", "celebrate"),
    "error": ("x", "alert-triangle", "alert-circle"),
    "warning": ("alert-triangle", "alert", "exclamation"),
    "info": ("info", "help-circle", "question-mark"),
}

_EMOTIONS: Dict[str, Tuple[str, ...]] = {
    "happy": ("smile", "heart", "sun", "star"),
    "sad": ("frown", "cloud", "rain"),
    "success": ("trophy", "check", "thumbs-up", "star"),
    "failure": ("x", "alert", "thumbs-down"),
    "loading": ("loader", "spinner", "hourglass"),
    "waiting": ("clock", "hourglass", "timer"),
    "complete": ("check-circle", "check", "done"),
    "pending": ("clock", "hourglass", "pause"),
    "active": ("play", "circle", "radio"),
    "inactive": ("pause", "stop", "circle-off"),
}

_SETTINGS: Dict[str, Tuple[str, ...]] = {
    "office": ("briefcase", "building", "desktop"),
    "home": ("house", "home", "sofa"),
    "cloud": ("cloud", "server", "database"),
    "mobile": ("smartphone", "phone", "tablet"),
    "web": ("globe", "browser", "layout"),
    "night": ("moon", "star", "dark"),
    "day": ("sun", "light", "bright"),
}

# Illustration themes (for Storyset / IRA Design)
_THEMES: Dict[str, Tuple[str, ...]] = {
    "business": ("meeting", "presentation", "teamwork", "handshake"),
    "technology": ("coding", "developer", "computer", "server"),
    "education": ("learning", "book", "graduation", "student"),
    "health": ("doctor", "medical", "fitness", "wellness"),
    "finance": ("money", "bank", "investment", "trading"),
    "communication": ("chat", "social", "message", "email"),
    "creative": ("design", "art", "creative", "palette"),
    "startup": ("rocket", "growth", "innovation", "idea"),
}

CONTEXT_MAPPINGS: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "actions": MappingProxyType(_ACTIONS),
    "subjects": MappingProxyType(_SUBJECTS),
    "emotions": MappingProxyType(_EMOTIONS),
    "settings": MappingProxyType(_SETTINGS),
    "themes": MappingProxyType(_THEMES),
})


def _words(text: str) -> List[str]:
    return (text or "").lower().split()


def parse_context(text: str) -> StoryContext:
    """Detect one action, subject, emotion and setting; later words win."""
    context = StoryContext()

    for word in _words(text):
        if word in _ACTIONS:
            context.action = word
        if word in _SUBJECTS:
            context.subject = word
        if word in _EMOTIONS:
            context.emotion = word
        if word in _SETTINGS:
            context.setting = word

    return context


def get_icons_for_context(context: Union[str, StoryContext]) -> List[str]:
    """Icon name hints for a context, deduplicated in first-seen order."""
    if isinstance(context, str):
        context = parse_context(context)

    icons: List[str] = []
    if context.action in _ACTIONS:
        icons.extend(_ACTIONS[context.action])
    if context.subject in _SUBJECTS:
        icons.extend(_SUBJECTS[context.subject])
    if context.emotion in _EMOTIONS:
        icons.extend(_EMOTIONS[context.emotion])

    return list(dict.fromkeys(icons))


def get_themes_for_context(text: str) -> List[str]:
    """Every theme touched by the text, or the default theme."""
    words = set(_words(text))
    themes = [
        theme
        for theme, keywords in _THEMES.items()
        if theme in words or words.intersection(keywords)
    ]
    return themes or [DEFAULT_THEME]
