import sys
import unittest
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_drafts.normalize import normalize_profile  # noqa: E402
from resume_drafts.recommend import (  # noqa: E402
    get_recommendation_reasons,
    get_template_recommendations,
    get_top_recommendations,
    is_template_recommended,
    profile_signals,
    score_template,
)
from resume_drafts.recommend.templates import infer_experience_level, work_experience_years  # noqa: E402
from resume_drafts.schemas.template import ResumeTemplate  # noqa: E402

TEMPLATES = [
    {
        "id": "tech-modern",
        "description": "Built for software-engineering teams",
        "category": "software-engineering",
        "tags": ["modern", "technical", "minimal", "ats-friendly"],
        "popularity": 92,
    },
    {
        "id": "exec",
        "category": "executive",
        "tags": ["executive", "sophisticated", "comprehensive"],
        "popularity": 60,
    },
    {
        "id": "student-clean",
        "category": "student",
        "tags": ["simple", "clean", "student-friendly"],
        "popularity": 40,
    },
    {
        "id": "creative",
        "category": "design",
        "tags": ["creative", "colorful", "artistic"],
        "popularity": 30,
    },
]


class ScoreTemplateTests(unittest.TestCase):
    def test_industry_match_reasons(self):
        signals = profile_signals({"target_industry": "software-engineering", "experience_level": "mid"})
        score = score_template(ResumeTemplate.model_validate(TEMPLATES[0]), signals)
        self.assertEqual(score.breakdown.industry, 30)
        self.assertIn("Designed for Software Engineering professionals", score.reasons)
        self.assertIn("Modern style suits Software Engineering", score.reasons)
        self.assertIn("Highly popular template", score.reasons)
        self.assertIn("ATS-friendly format", score.reasons)
        self.assertEqual(score.breakdown.style, 20)

    def test_no_industry_gets_neutral_score(self):
        signals = profile_signals({})
        score = score_template(ResumeTemplate.model_validate(TEMPLATES[3]), signals)
        self.assertEqual(score.breakdown.industry, 15)

    def test_entry_level_prefers_simple_layouts(self):
        signals = profile_signals({"experience_level": "entry"})
        score = score_template(ResumeTemplate.model_validate(TEMPLATES[2]), signals)
        self.assertEqual(score.breakdown.experience_level, 25)
        self.assertIn("Appropriate for entry-level professionals", score.reasons)
        self.assertIn("Clean layout perfect for entry-level resumes", score.reasons)
        self.assertEqual(score.breakdown.completeness, 10)
        self.assertIn("Clean design works well with focused content", score.reasons)

    def test_senior_level_prefers_sophisticated_layouts(self):
        signals = profile_signals({"experience_level": "senior"})
        score = score_template(ResumeTemplate.model_validate(TEMPLATES[1]), signals)
        self.assertEqual(score.breakdown.experience_level, 25)
        self.assertIn("Sophisticated design for experienced professionals", score.reasons)

    def test_job_type_reason_only_for_non_full_time(self):
        template = ResumeTemplate.model_validate(TEMPLATES[3])
        freelance = score_template(template, profile_signals({"target_industry": "freelance consultant"}))
        self.assertEqual(freelance.breakdown.job_type, 5)
        self.assertIn("Optimized for freelance positions", freelance.reasons)

        full_time = score_template(
            ResumeTemplate.model_validate(TEMPLATES[1]), profile_signals({"job_type": "full-time"})
        )
        self.assertEqual(full_time.breakdown.job_type, 5)
        self.assertFalse(any(reason.startswith("Optimized for") for reason in full_time.reasons))

    def test_complete_profile_favours_comprehensive_templates(self):
        profile = {
            "experience_level": "senior",
            "work_experience": [{"company": "Acme", "start_date": "2015-01", "end_date": "2020-06"}],
            "education": [{"institution": "State U"}],
            "skills": ["Python"],
        }
        score = score_template(ResumeTemplate.model_validate(TEMPLATES[1]), profile_signals(profile))
        self.assertEqual(score.breakdown.completeness, 10)
        self.assertIn("Showcases your complete profile", score.reasons)

    def test_total_is_sum_and_bounded(self):
        profiles = [
            {},
            {"target_industry": "design", "experience_level": "executive", "job_type": "remote"},
            {"target_industry": "software-engineering", "experience_level": "entry"},
        ]
        for profile in profiles:
            signals = profile_signals(profile)
            for raw in TEMPLATES:
                with self.subTest(profile=profile, template=raw["id"]):
                    score = score_template(ResumeTemplate.model_validate(raw), signals)
                    self.assertEqual(score.score, score.breakdown.total())
                    self.assertGreaterEqual(score.score, 0)
                    self.assertLessEqual(score.score, 100)


class ExperienceInferenceTests(unittest.TestCase):
    NOW = datetime(2024, 6, 1)

    def test_years_from_history(self):
        profile = normalize_profile(
            {
                "work_experience": [
                    {"start_date": "2018-01", "end_date": "2021-01"},
                    {"startDate": "2022-06-01", "current": True},
                ]
            }
        )
        self.assertEqual(work_experience_years(profile, self.NOW), 5)
        self.assertEqual(infer_experience_level(profile, self.NOW), "senior")

    def test_unparseable_dates_count_as_zero(self):
        profile = normalize_profile({"work_experience": [{"start_date": "last spring", "end_date": "now"}]})
        self.assertEqual(work_experience_years(profile, self.NOW), 0)
        self.assertEqual(infer_experience_level(profile, self.NOW), "entry")

    def test_level_brackets(self):
        brackets = [
            ("2024-01", "entry"),
            ("2023-01", "junior"),
            ("2021-01", "mid"),
            ("2016-01", "senior"),
            ("2010-01", "executive"),
        ]
        for start, expected in brackets:
            with self.subTest(start=start):
                profile = normalize_profile({"work_experience": [{"start_date": start, "current": True}]})
                self.assertEqual(infer_experience_level(profile, self.NOW), expected)

    def test_explicit_level_wins(self):
        profile = normalize_profile({"experience_level": "Junior", "work_experience": [{"start_date": "2000-01"}]})
        self.assertEqual(infer_experience_level(profile, self.NOW), "junior")


class RecommendationRankingTests(unittest.TestCase):
    PROFILE = {"target_industry": "software-engineering", "experience_level": "mid"}

    def test_ranked_best_first_with_top_three_flagged(self):
        results = get_template_recommendations(self.PROFILE, TEMPLATES)
        self.assertEqual([result.rank for result in results], [1, 2, 3, 4])
        scores = [result.score.score for result in results]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual([result.is_recommended for result in results], [True, True, True, False])
        self.assertEqual(results[0].template.id, "tech-modern")

    def test_fewer_than_three_templates_all_recommended(self):
        results = get_template_recommendations(self.PROFILE, TEMPLATES[:2])
        self.assertTrue(all(result.is_recommended for result in results))

    def test_helpers(self):
        top = get_top_recommendations(self.PROFILE, TEMPLATES, count=2)
        self.assertEqual(len(top), 2)
        self.assertTrue(is_template_recommended("tech-modern", self.PROFILE, TEMPLATES))
        self.assertFalse(is_template_recommended("missing", self.PROFILE, TEMPLATES))
        self.assertIn("ATS-friendly format", get_recommendation_reasons("tech-modern", self.PROFILE, TEMPLATES))
        self.assertEqual(get_recommendation_reasons("missing", self.PROFILE, TEMPLATES), [])

    def test_empty_template_list(self):
        self.assertEqual(get_template_recommendations(self.PROFILE, []), [])


if __name__ == "__main__":
    unittest.main()
