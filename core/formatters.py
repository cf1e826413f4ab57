# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_bar(count: int, total: int, width: int = 20) -> str:
    if total == 0:
        return ""

    return "#" * round(width * count / total)


# === academic formatters ===


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"


def format_attendance(attendance: float) -> str:
    return f"{attendance:.0f}%"


def format_average_attendance(attendance: float) -> str:
    return f"{attendance:.1f}%"
