"""
Localized messages for the customer login flow.

Keys follow the login form's message names. Unknown locales fall back to
English; unknown keys are returned unchanged.
"""

from typing import Optional

from shared.config import get_settings


FALLBACK_LOCALE = "en"

LOGIN_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "invalid-credentials": "Please check your credentials and try again.",
        "not-activated": "Your account is not activated yet. Please contact the store administrator.",
        "verify-first": "Verify your email account first.",
        "logged-in": "Logged in successfully.",
        "logged-out": "Logged out successfully.",
    },
    "fr": {
        "invalid-credentials": "Veuillez vérifier vos identifiants et réessayer.",
        "not-activated": "Votre compte n'est pas encore activé. Veuillez contacter l'administrateur de la boutique.",
        "verify-first": "Veuillez d'abord vérifier votre adresse e-mail.",
        "logged-in": "Connexion réussie.",
        "logged-out": "Déconnexion réussie.",
    },
    "es": {
        "invalid-credentials": "Compruebe sus credenciales e inténtelo de nuevo.",
        "not-activated": "Su cuenta aún no está activada. Póngase en contacto con el administrador de la tienda.",
        "verify-first": "Verifique primero su correo electrónico.",
        "logged-in": "Sesión iniciada correctamente.",
        "logged-out": "Sesión cerrada correctamente.",
    },
}


def trans(key: str, locale: Optional[str] = None) -> str:
    """Translate a message key into the given (or configured) locale."""
    locale = (locale or get_settings().locale or FALLBACK_LOCALE).lower()
    messages = LOGIN_MESSAGES.get(locale) or LOGIN_MESSAGES[FALLBACK_LOCALE]
    if key in messages:
        return messages[key]
    return LOGIN_MESSAGES[FALLBACK_LOCALE].get(key, key)
