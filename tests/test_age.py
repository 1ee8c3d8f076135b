from datetime import date

from fambul_tik.models.entities import Member
from fambul_tik.services.age import compute_age, member_age


def test_age_not_counted_until_birthday_recurs():
    assert compute_age(date(2000, 6, 15), today=date(2024, 6, 14)) == 23
    assert compute_age(date(2000, 6, 15), today=date(2024, 6, 15)) == 24


def test_age_uses_date_of_death():
    assert compute_age(date(1990, 1, 1), date(2020, 12, 31), today=date(2050, 1, 1)) == 30


def test_age_on_birth_date_is_zero():
    assert compute_age(date(2024, 3, 1), today=date(2024, 3, 1)) == 0


def test_age_leap_day_birthday():
    assert compute_age(date(2000, 2, 29), today=date(2023, 2, 28)) == 22
    assert compute_age(date(2000, 2, 29), today=date(2023, 3, 1)) == 23


def test_member_age_ignores_query_date_for_deceased():
    member = Member(
        first_name="Ada",
        last_name="Cole",
        date_of_birth=date(1990, 1, 1),
        is_alive=False,
        date_of_death=date(2020, 12, 31),
    )
    assert member_age(member, today=date(2021, 6, 1)) == 30
    assert member_age(member, today=date(2099, 6, 1)) == 30


def test_member_age_for_living_member_uses_today():
    member = Member(first_name="Ada", last_name="Cole", date_of_birth=date(2000, 6, 15), is_alive=True)
    assert member_age(member, today=date(2024, 6, 14)) == 23
