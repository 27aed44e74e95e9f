from enum import Enum


class Language(Enum):
    ES = "es"  # Español (default)
    EN = "en"  # English
    FR = "fr"  # Français
    IT = "it"  # Italiano
    DE = "de"  # Deutsch
    CA = "ca"  # Català
