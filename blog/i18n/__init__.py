from blog.i18n.locale import RTL_LOCALES, is_rtl_locale, is_valid_locale

__all__ = ["RTL_LOCALES", "is_rtl_locale", "is_valid_locale"]
