def _amount(value: float | int) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}"


def format_salary(salary_min: float | int | None, salary_max: float | int | None, currency: str = "$") -> str | None:
    """
    Render a salary range for listings.
    Equal bounds collapse to one value: (500, 500) -> "$500"; (500, 1500) -> "$500 - $1500".
    """
    if salary_min is None and salary_max is None:
        return None
    if salary_min is None or salary_max is None:
        only = salary_min if salary_min is not None else salary_max
        return f"{currency}{_amount(only)}"
    if float(salary_min) == float(salary_max):
        return f"{currency}{_amount(salary_min)}"
    return f"{currency}{_amount(salary_min)} - {currency}{_amount(salary_max)}"
