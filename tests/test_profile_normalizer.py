import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_drafts.normalize import (  # noqa: E402
    normalize_profile,
    parse_name_list,
    parse_record_list,
)
from resume_drafts.normalize.utils import parse_string_list  # noqa: E402
from resume_drafts.schemas.profile import UserProfile  # noqa: E402


class RecordListParsingTests(unittest.TestCase):
    def test_absent_and_blank_inputs_yield_empty_list(self):
        for raw in (None, "", "   ", 42, {"company": "Acme"}):
            with self.subTest(raw=raw):
                self.assertEqual(parse_record_list(raw, field_name="work_experience"), [])

    def test_malformed_json_is_logged_and_ignored(self):
        with self.assertLogs("resume_drafts.normalize.profile_fields", level="WARNING") as captured:
            parsed = parse_record_list("[{not json", field_name="work_experience")
        self.assertEqual(parsed, [])
        self.assertTrue(any("profile_field_parse_failed field=work_experience" in line for line in captured.output))

    def test_json_object_instead_of_array_is_ignored(self):
        with self.assertLogs("resume_drafts.normalize.profile_fields", level="WARNING"):
            self.assertEqual(parse_record_list('{"company": "Acme"}', field_name="education"), [])

    def test_non_mapping_items_are_dropped(self):
        raw = json.dumps([{"company": "Acme"}, "stray", 3, None])
        self.assertEqual(parse_record_list(raw, field_name="work_experience"), [{"company": "Acme"}])


class NameListParsingTests(unittest.TestCase):
    def test_free_text_splits_on_newlines_before_commas(self):
        self.assertEqual(parse_string_list("Python, SQL\nDocker"), ["Python, SQL", "Docker"])
        self.assertEqual(parse_string_list("Python, SQL , "), ["Python", "SQL"])

    def test_json_array_of_strings_and_objects(self):
        raw = json.dumps(["Python", {"name": "Docker"}, {"label": "ignored"}, ""])
        self.assertEqual(parse_name_list(raw, field_name="skills"), ["Python", "Docker"])


class NormalizeProfileTests(unittest.TestCase):
    def test_none_profile_gives_safe_defaults(self):
        profile = normalize_profile(None)
        self.assertEqual(profile.full_name, "")
        self.assertFalse(profile.has_work_experience)
        self.assertEqual(profile.experience, [])
        self.assertEqual(profile.skill_names, [])

    def test_experience_aliases_prefer_canonical_names(self):
        raw = json.dumps(
            [
                {
                    "company": "Acme",
                    "employer": "Ignored Co",
                    "title": "Engineer",
                    "startDate": "2019-01",
                    "is_current": True,
                    "achievements": "Led migration\nReduced cost",
                },
                {"company": "  ", "employer": "Fallback Inc", "role": "Analyst"},
            ]
        )
        profile = normalize_profile({"work_experience": raw})
        first, second = profile.experience
        self.assertEqual(first["company"], "Acme")
        self.assertEqual(first["position"], "Engineer")
        self.assertEqual(first["start_date"], "2019-01")
        self.assertTrue(first["current"])
        self.assertEqual(first["highlights"], ["Led migration", "Reduced cost"])
        self.assertEqual(second["company"], "Fallback Inc")
        self.assertEqual(second["position"], "Analyst")

    def test_education_and_project_aliases(self):
        profile = normalize_profile(
            {
                "education": [{"school": "State U", "degree_type": "BS", "major": "Physics", "grade": "3.8"}],
                "projects": [{"title": "Tracker", "summary": "Habit tracker", "technologies": "React, Node", "link": "x.dev"}],
            }
        )
        self.assertEqual(profile.education[0]["institution"], "State U")
        self.assertEqual(profile.education[0]["degree"], "BS")
        self.assertEqual(profile.education[0]["field"], "Physics")
        self.assertEqual(profile.education[0]["gpa"], "3.8")
        self.assertEqual(profile.projects[0]["name"], "Tracker")
        self.assertEqual(profile.projects[0]["description"], "Habit tracker")
        self.assertEqual(profile.projects[0]["technologies"], ["React", "Node"])
        self.assertEqual(profile.projects[0]["url"], "x.dev")

    def test_unparseable_history_still_counts_as_work_experience(self):
        with self.assertLogs("resume_drafts.normalize.profile_fields", level="WARNING"):
            profile = normalize_profile({"work_experience": "worked at a bakery"})
        self.assertTrue(profile.has_work_experience)
        self.assertEqual(profile.experience, [])

    def test_empty_list_means_no_work_experience(self):
        self.assertFalse(normalize_profile({"work_experience": []}).has_work_experience)
        self.assertFalse(normalize_profile({"work_experience": "  "}).has_work_experience)

    def test_skill_names_merge_key_skills_then_skills_without_duplicates(self):
        profile = normalize_profile(
            {"key_skills": "Python, SQL", "skills": json.dumps(["python", {"name": "Docker"}])}
        )
        self.assertEqual(profile.skill_names, ["Python", "SQL", "Docker"])

    def test_job_type_falls_back_to_preferred_work_type(self):
        self.assertEqual(normalize_profile({"preferred_work_type": "remote"}).job_type, "remote")
        self.assertEqual(
            normalize_profile({"job_type": "contract", "preferred_work_type": "remote"}).job_type,
            "contract",
        )

    def test_scalar_fields_are_coerced_leniently(self):
        profile = UserProfile.model_validate({"experience_level": 5, "first_name": True, "last_name": ["x"]})
        self.assertEqual(profile.experience_level, "5")
        self.assertIsNone(profile.first_name)
        self.assertIsNone(profile.last_name)

    def test_full_name_collapses_whitespace(self):
        profile = normalize_profile({"first_name": " Ada ", "last_name": "Lovelace"})
        self.assertEqual(profile.full_name, "Ada Lovelace")


if __name__ == "__main__":
    unittest.main()
