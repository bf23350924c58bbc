NOT_FOUND = -1


def nth_occurrence(text: str, delimiter: str, n: int) -> int:
    """
    Индекс n-го (с единицы) вхождения delimiter в text.
    Считается через split: сумма длин первых n сегментов плюс разделители между ними.
    Возвращает NOT_FOUND, если разделителя нет или сегментов меньше n + 1.
    """
    if not delimiter:
        raise ValueError("Разделитель не может быть пустым")
    if n < 1:
        raise ValueError(f"Номер вхождения должен быть >= 1, получено {n}")

    parts = text.split(delimiter)
    if len(parts) < n + 1:
        return NOT_FOUND

    index = 0
    for part in parts[:n]:
        index += len(part) + len(delimiter)

    # последний разделитель не входит в позицию
    return index - len(delimiter)
