from datetime import date


def compute_age(date_of_birth: date, date_of_death: date | None = None, today: date | None = None) -> int:
    end = date_of_death or today or date.today()
    age = end.year - date_of_birth.year
    if (end.month, end.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def member_age(member, today: date | None = None) -> int:
    return compute_age(
        member.date_of_birth,
        None if member.is_alive else member.date_of_death,
        today=today,
    )
