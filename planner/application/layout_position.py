"""Position calculator - column assignment to horizontal percent offsets."""


def compute_position(column_index: int, total_columns: int) -> tuple[float, float]:
    """
    Returns:
        (left, width) in percent of the day column width
    """
    if total_columns < 1:
        raise ValueError(f"total_columns must be >= 1: {total_columns}")
    if not 0 <= column_index < total_columns:
        raise ValueError(f"column_index {column_index} out of range for {total_columns} column(s)")

    width = 100 / total_columns
    return column_index * width, width
