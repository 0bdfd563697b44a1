Location = tuple[int, int]
