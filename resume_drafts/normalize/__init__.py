from .profile_fields import (
    NormalizedProfile,
    canonical_education,
    canonical_experience,
    canonical_project,
    is_populated,
    normalize_education,
    normalize_experience,
    normalize_profile,
    normalize_projects,
    normalize_skill_names,
    parse_name_list,
    parse_record_list,
)

__all__ = [
    "NormalizedProfile",
    "canonical_education",
    "canonical_experience",
    "canonical_project",
    "is_populated",
    "normalize_education",
    "normalize_experience",
    "normalize_profile",
    "normalize_projects",
    "normalize_skill_names",
    "parse_name_list",
    "parse_record_list",
]
