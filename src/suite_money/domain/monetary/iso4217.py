"""ISO 4217 currency codes with their minor units, and cash rounding overrides.

Codes without a minor unit in ISO 4217 (precious metals and special codes) use
`DEFAULT_SCALE`. Cash rounding follows the CLDR supplemental currency data.
"""

from __future__ import annotations

# Scale used for codes that define no minor unit
DEFAULT_SCALE = 2

_ZERO_DIGIT_CODES = "BIF CLP DJF GNF ISK JPY KMF KRW PYG RWF UGX UYI VND VUV XAF XOF XPF"

_TWO_DIGIT_CODES = """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BMD BND BOB BOV BRL BSD BTN BWP BYN
    BZD CAD CDF CHE CHF CHW CNY COP COU CRC CUC CUP CVE CZK DKK DOP DZD EGP ERN ETB EUR FJD FKP
    GBP GEL GHS GIP GMD GTQ GYD HKD HNL HRK HTG HUF IDR ILS INR IRR JMD KES KGS KHR KPW KYD KZT
    LAK LBP LKR LRD LSL MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MXV MYR MZN NAD NGN NIO
    NOK NPR NZD PAB PEN PGK PHP PKR PLN QAR RON RSD RUB SAR SBD SCR SDG SEK SGD SHP SLE SLL SOS
    SRD SSP STN SVC SYP SZL THB TJS TMT TOP TRY TTD TWD TZS UAH USD USN UYU UZS VED VES WST XCD
    XCG YER ZAR ZMW ZWG ZWL
"""

_THREE_DIGIT_CODES = "BHD IQD JOD KWD LYD OMR TND"

_FOUR_DIGIT_CODES = "CLF UYW"

_NO_MINOR_UNIT_CODES = "XAG XAU XBA XBB XBC XBD XDR XPD XPT XSU XTS XUA XXX"


def _scales(codes: str, scale: int) -> dict[str, int]:
    return {code: scale for code in codes.split()}


# Standard scale (number of fractional digits) per ISO 4217 code
ISO_4217_SCALES: dict[str, int] = {
    **_scales(_ZERO_DIGIT_CODES, 0),
    **_scales(_TWO_DIGIT_CODES, 2),
    **_scales(_THREE_DIGIT_CODES, 3),
    **_scales(_FOUR_DIGIT_CODES, 4),
    **_scales(_NO_MINOR_UNIT_CODES, DEFAULT_SCALE),
}

# Cash rounding as (scale, increment); other codes round cash like the standard scale
CASH_ROUNDING: dict[str, tuple[int, int]] = {
    "CAD": (2, 5),
    "CHF": (2, 5),
    "DKK": (2, 50),
    **{code: (0, 1) for code in "AMD COP CRC CZK GYD HUF IDR MNT MUR NOK PKR SEK TWD TZS UZS".split()},
}
