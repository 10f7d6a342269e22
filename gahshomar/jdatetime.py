# Gregorian & Jalali ( Hijri_Shamsi , Solar ) Date Converter  Functions
# Author: JDF.SCR.IR =>> Download Full Version :  http://jdf.scr.ir/jdf
# License: GNU/LGPL _ Open Source & Free :: Version: 2.80 : [2020=1399]
# ---------------------------------------------------------------------
# 355746=361590-5844 & 361590=(30*33*365)+(30*8) & 5844=(16*365)+(16/4)
# 355666=355746-79-1 & 355668=355746-79+1 &  1595=605+990 &  605=621-16
# 990=30*33 & 12053=(365*33)+(32/4) & 36524=(365*100)+(100/4)-(100/100)
# 1461=(365*4)+(4/4)   &   146097=(365*400)+(400/4)-(400/100)+(400/400)

# Both converters are closed-form and only defined on valid dates; they do not
# validate their input. Leap years follow the 33-year rule of `is_leap_jalali`.

from .common import InvalidJalaliDate

CUMULATIVE_GREGORIAN_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_gregorian(gy: int) -> bool:
    return (gy % 4 == 0 and gy % 100 != 0) or (gy % 400 == 0)


def is_leap_jalali(jy: int) -> bool:
    return ((jy + 12) % 33) % 4 == 1


def jalali_month_length(jy: int, jm: int) -> int:
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_jalali(jy) else 29


def jalali_day_of_year(jm: int, jd: int) -> int:
    """One-based ordinal of the day within its Jalali year"""
    if jm < 7:
        return (jm - 1) * 31 + jd
    return (jm - 7) * 30 + jd + 186


def is_valid_jalali(jm: int, jd: int, jy: int) -> bool:
    if jy < 1 or jm < 1 or jm > 12 or jd < 1:
        return False
    return jd <= jalali_month_length(jy, jm)


def require_valid_jalali(jy: int, jm: int, jd: int) -> tuple[int, int, int]:
    if not is_valid_jalali(jm, jd, jy):
        raise InvalidJalaliDate(f"Invalid solar hijri date: `{jy}/{jm:02}/{jd:02}`")
    return jy, jm, jd


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> tuple[int, int, int]:
    if gm > 2:
        gy2 = gy + 1
    else:
        gy2 = gy
    days = (
        355666
        + (365 * gy)
        + ((gy2 + 3) // 4)
        - ((gy2 + 99) // 100)
        + ((gy2 + 399) // 400)
        + gd
        + CUMULATIVE_GREGORIAN_DAYS[gm - 1]
    )
    jy = -1595 + (33 * (days // 12053))
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365
    if days < 186:
        jm = 1 + (days // 31)
        jd = 1 + (days % 31)
    else:
        jm = 7 + ((days - 186) // 30)
        jd = 1 + ((days - 186) % 30)
    return jy, jm, jd


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> tuple[int, int, int]:
    jy += 1595
    days = -355668 + (365 * jy) + ((jy // 33) * 8) + (((jy % 33) + 3) // 4) + jd
    if jm < 7:
        days += (jm - 1) * 31
    else:
        days += ((jm - 7) * 30) + 186
    gy = 400 * (days // 146097)
    days %= 146097
    if days > 36524:
        days -= 1
        gy += 100 * (days // 36524)
        days %= 36524
        if days >= 365:
            days += 1
    gy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365
    gd = days + 1
    month_days = (0, 31, 29 if is_leap_gregorian(gy) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    gm = 0
    while gm < 13 and gd > month_days[gm]:
        gd -= month_days[gm]
        gm += 1
    return gy, gm, gd
