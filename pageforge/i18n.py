"""Internationalization helpers for generated page copy.

Provide the fixed strings that appear in generated landing pages (section
headings, control labels, footer text) in every supported language. The
page generator looks strings up through ``translate`` with the language
carried by the configuration, so generation stays free of global state.

Typical usage::

    from pageforge.i18n import translate

    heading = translate("faq_title", "pt")

"""

from __future__ import annotations

from pageforge.config import DEFAULT_LANGUAGE, HTML_LANG_ATTRIBUTES

TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "page_title": "{name} - Landing Page",
        "benefits_title": "Why choose {name}?",
        "stats_title": "By the numbers",
        "testimonials_title": "What our customers say",
        "faq_title": "Frequently Asked Questions",
        "gallery_title": "Gallery",
        "gallery_image_alt": "Gallery image {number}",
        "cta_title": "Ready to get started?",
        "contact_label": "Contact:",
        "footer_rights": "All rights reserved.",
        "carousel_previous": "Previous testimonial",
        "carousel_next": "Next testimonial",
        "carousel_indicator": "Show testimonial {number}",
        "lightbox_close": "Close",
        "lightbox_previous": "Previous image",
        "lightbox_next": "Next image",
        "lightbox_dialog": "Image viewer",
        "form_required_alert": "Please fill in all required fields.",
    },
    "pt": {
        "page_title": "{name} - Landing Page",
        "benefits_title": "Por que escolher {name}?",
        "stats_title": "Em números",
        "testimonials_title": "O que nossos clientes dizem",
        "faq_title": "Perguntas Frequentes",
        "gallery_title": "Galeria",
        "gallery_image_alt": "Galeria {number}",
        "cta_title": "Pronto para começar?",
        "contact_label": "Contato:",
        "footer_rights": "Todos os direitos reservados.",
        "carousel_previous": "Depoimento anterior",
        "carousel_next": "Próximo depoimento",
        "carousel_indicator": "Mostrar depoimento {number}",
        "lightbox_close": "Fechar",
        "lightbox_previous": "Imagem anterior",
        "lightbox_next": "Próxima imagem",
        "lightbox_dialog": "Visualizador de imagens",
        "form_required_alert": "Por favor, preencha todos os campos obrigatórios.",
    },
}


def resolve_language(lang: str | None) -> str:
    """Return a supported language code, falling back to the default."""
    candidate = (lang or "").strip().lower()
    if candidate in TEXTS:
        return candidate
    # Accept regional tags such as "pt-BR" or "en_US".
    primary = candidate.replace("_", "-").split("-", 1)[0]
    if primary in TEXTS:
        return primary
    return DEFAULT_LANGUAGE


def translate(key: str, lang: str = DEFAULT_LANGUAGE, **values: object) -> str:
    r"""Translate a copy key to the given language and fill its placeholders.

    Returns the string for ``key`` in ``lang``. Unsupported languages fall
    back to English and unknown keys fall back to the key itself, so a
    missing translation degrades to readable output rather than an error.

    Parameters
    ----------
    key : str
        The string key for the piece of copy.
    lang : str, optional
        Language code, e.g. ``"en"`` or ``"pt"``.
    **values : object
        Values substituted into ``{placeholder}`` fields of the string.

    Returns
    -------
    str
        The translated and formatted string, or the key itself as fallback.

    Examples
    --------
    >>> translate("faq_title", "en")
    'Frequently Asked Questions'
    >>> translate("benefits_title", "pt", name="Acme")
    'Por que escolher Acme?'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    table = TEXTS.get(resolve_language(lang), TEXTS[DEFAULT_LANGUAGE])
    text = table.get(key, TEXTS[DEFAULT_LANGUAGE].get(key, key))
    if values:
        return text.format(**values)
    return text


def html_lang_attribute(lang: str) -> str:
    """Return the value of the document ``lang`` attribute for ``lang``."""
    return HTML_LANG_ATTRIBUTES[resolve_language(lang)]

