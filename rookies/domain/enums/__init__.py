from rookies.domain.enums.gender import Gender
__all__ = [
    "Gender",
]
