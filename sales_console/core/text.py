def alternate_case(value: str, lower_first: bool) -> str:
    """
    Re-case a string so letters alternate by position.

    lower_first=True  -> even indices lowercased, odd indices uppercased ("hElLo")
    lower_first=False -> even indices uppercased, odd indices lowercased ("HeLlO")

    Characters without case pass through unchanged. Output length always
    equals input length.
    """
    chars = []
    for index, char in enumerate(value):
        upper = (index % 2 != 0) if lower_first else (index % 2 == 0)
        # str.upper() can expand some characters ("ß" -> "SS"); keep those as-is
        recased = char.upper() if upper else char.lower()
        chars.append(recased if len(recased) == 1 else char)
    return "".join(chars)
