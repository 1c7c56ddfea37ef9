"""
Closed vocabularies for Open Graph Protocol values.

Page types are grouped by category as listed on http://ogp.me/#types.
Locales follow the Facebook locale list: language_TERRITORY, where language
is an ISO 639-1 alpha-2 code and territory an ISO 3166-1 alpha-2 code, with
the special regions 'AR' (Arab region) and 'LA' (Latin America).

Human-readable labels pass through an optional ``translate`` callable
(for example ``gettext.gettext``) so callers can localize them.
"""
from typing import Callable, Dict, List, Optional, Union

Translator = Callable[[str], str]

PAGE_TYPES: Dict[str, Dict[str, str]] = {
    "Activities": {
        "activity": "Activity",
        "sport": "Sport",
    },
    "Businesses": {
        "company": "Company",
        "bar": "Bar",
        "cafe": "Cafe",
        "hotel": "Hotel",
        "restaurant": "Restaurant",
    },
    "Groups": {
        "cause": "Cause",
        "sports_league": "Sports league",
        "sports_team": "Sports team",
    },
    "Organizations": {
        "band": "Band",
        "government": "Government",
        "non_profit": "Non-profit",
        "school": "School",
        "university": "University",
    },
    "People": {
        "actor": "Actor or actress",
        "athlete": "Athlete",
        "author": "Author",
        "director": "Director",
        "musician": "Musician",
        "politician": "Politician",
        "profile": "Profile",
        "public_figure": "Public Figure",
    },
    "Places": {
        "city": "City or locality",
        "country": "Country",
        "landmark": "Landmark",
        "state_province": "State or province",
    },
    "Products and Entertainment": {
        "music.album": "Music Album",
        "book": "Book",
        "drink": "Drink",
        "video.episode": "Video episode",
        "food": "Food",
        "game": "Game",
        "video.movie": "Movie",
        "music.playlist": "Music playlist",
        "product": "Product",
        "music.radio_station": "Radio station",
        "music.song": "Song",
        "video.tv_show": "Television show",
        "video.other": "Video",
    },
    "Websites": {
        "article": "Article",
        "blog": "Blog",
        "website": "Website",
    },
}

LOCALES: Dict[str, str] = {
    "af_ZA": "Afrikaans",
    "ar_AR": "Arabic",
    "az_AZ": "Azeri",
    "be_BY": "Belarusian",
    "bg_BG": "Bulgarian",
    "bn_IN": "Bengali",
    "bs_BA": "Bosnian",
    "ca_ES": "Catalan",
    "cs_CZ": "Czech",
    "cy_GB": "Welsh",
    "da_DK": "Danish",
    "de_DE": "German",
    "el_GR": "Greek",
    "en_GB": "English (UK)",
    "en_US": "English (US)",
    "eo_EO": "Esperanto",
    "es_ES": "Spanish (Spain)",
    "es_LA": "Spanish (Latin America)",
    "et_EE": "Estonian",
    "eu_ES": "Basque",
    "fa_IR": "Persian",
    "fi_FI": "Finnish",
    "fo_FO": "Faroese",
    "fr_CA": "French (Canada)",
    "fr_FR": "French (France)",
    "fy_NL": "Frisian",
    "ga_IE": "Irish",
    "gl_ES": "Galician",
    "he_IL": "Hebrew",
    "hi_IN": "Hindi",
    "hr_HR": "Croatian",
    "hu_HU": "Hungarian",
    "hy_AM": "Armenian",
    "id_ID": "Indonesian",
    "is_IS": "Icelandic",
    "it_IT": "Italian",
    "ja_JP": "Japanese",
    "ka_GE": "Georgian",
    "ko_KR": "Korean",
    "ku_TR": "Kurdish",
    "la_VA": "Latin",
    "lt_LT": "Lithuanian",
    "lv_LV": "Latvian",
    "mk_MK": "Macedonian",
    "ml_IN": "Malayalam",
    "ms_MY": "Malay",
    "nb_NO": "Norwegian (bokmal)",
    "ne_NP": "Nepali",
    "nl_NL": "Dutch",
    "nn_NO": "Norwegian (nynorsk)",
    "pa_IN": "Punjabi",
    "pl_PL": "Polish",
    "ps_AF": "Pashto",
    "pt_BR": "Portuguese (Brazil)",
    "pt_PT": "Portuguese (Portugal)",
    "ro_RO": "Romanian",
    "ru_RU": "Russian",
    "sk_SK": "Slovak",
    "sl_SI": "Slovenian",
    "sq_AL": "Albanian",
    "sr_RS": "Serbian",
    "sv_SE": "Swedish",
    "sw_KE": "Swahili",
    "ta_IN": "Tamil",
    "te_IN": "Telugu",
    "th_TH": "Thai",
    "tl_PH": "Filipino",
    "tr_TR": "Turkish",
    "uk_UA": "Ukrainian",
    "vi_VN": "Vietnamese",
    "zh_CN": "Simplified Chinese (China)",
    "zh_HK": "Traditional Chinese (Hong Kong)",
    "zh_TW": "Traditional Chinese (Taiwan)",
}


def _identity(text: str) -> str:
    return text


def supported_types(
    flatten: bool = False,
    translate: Optional[Translator] = None
) -> Union[Dict[str, Dict[str, str]], List[str]]:
    """
    List the page types allowed in the Open Graph Protocol.

    Args:
        flatten: Return only the type slugs, one level deep
        translate: Optional callable applied to category and type labels

    Returns:
        Mapping of category label to {slug: label}, or a list of slugs when flattened
    """
    if flatten:
        return [slug for group in PAGE_TYPES.values() for slug in group]

    _ = translate or _identity
    return {
        _(category): {slug: _(label) for slug, label in group.items()}
        for category, group in PAGE_TYPES.items()
    }


def supported_locales(
    keys_only: bool = False,
    translate: Optional[Translator] = None
) -> Union[Dict[str, str], List[str]]:
    """
    List the locales Facebook accepts.

    Args:
        keys_only: Return only the locale codes
        translate: Optional callable applied to language labels

    Returns:
        Mapping of locale code to language label, or a list of codes
    """
    if keys_only:
        return list(LOCALES)

    _ = translate or _identity
    return {code: _(label) for code, label in LOCALES.items()}


def is_supported_type(value) -> bool:
    """Whether ``value`` is one of the known page type slugs."""
    return isinstance(value, str) and any(value in group for group in PAGE_TYPES.values())


def is_supported_locale(value) -> bool:
    """Whether ``value`` is one of the known locale codes."""
    return isinstance(value, str) and value in LOCALES


# ISO 3166-1 alpha-2 officially assigned codes
COUNTRY_CODES = frozenset("""
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ
BA BB BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BV BW BY BZ
CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV CW CX CY CZ
DE DJ DK DM DO DZ
EC EE EG EH ER ES ET
FI FJ FK FM FO FR
GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY
HK HM HN HR HT HU
ID IE IL IM IN IO IQ IR IS IT
JE JM JO JP
KE KG KH KI KM KN KP KR KW KY KZ
LA LB LC LI LK LR LS LT LU LV LY
MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ
NA NC NE NF NG NI NL NO NP NR NU NZ
OM
PA PE PF PG PH PK PL PM PN PR PS PT PW PY
QA
RE RO RS RU RW
SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ
TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ
UA UG UM US UY UZ
VA VC VE VG VI VN VU
WF WS
YE YT
ZA ZM ZW
""".split())


def is_supported_country(value) -> bool:
    """Whether ``value`` is an assigned ISO 3166-1 alpha-2 country code."""
    return isinstance(value, str) and value in COUNTRY_CODES
