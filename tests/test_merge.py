import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_drafts.generation.merge import (  # noqa: E402
    merge_draft_into_document,
    normalize_sections,
    smart_merge_field,
)
from resume_drafts.schemas.draft import (  # noqa: E402
    BuilderSettings,
    Education,
    Experience,
    PersonalInfo,
    ResumeBuilderData,
    Skill,
)


class SmartMergeFieldTests(unittest.TestCase):
    PLACEHOLDERS = ["John Doe", "Your Name"]

    def test_profile_value_wins(self):
        self.assertEqual(smart_merge_field("  Ada Lovelace ", "Jane Roe", self.PLACEHOLDERS), "Ada Lovelace")

    def test_template_value_used_when_profile_blank(self):
        self.assertEqual(smart_merge_field("", "Jane Roe", self.PLACEHOLDERS), "Jane Roe")
        self.assertEqual(smart_merge_field(None, " Jane Roe ", self.PLACEHOLDERS), "Jane Roe")

    def test_placeholder_rejected_case_insensitively(self):
        self.assertEqual(smart_merge_field(None, "john doe", self.PLACEHOLDERS), "")
        self.assertEqual(smart_merge_field("   ", "YOUR NAME", self.PLACEHOLDERS), "")

    def test_nothing_available(self):
        self.assertEqual(smart_merge_field(None, None), "")
        self.assertEqual(smart_merge_field("", "  "), "")

    def test_idempotent(self):
        once = smart_merge_field("", "Jane Roe", self.PLACEHOLDERS)
        self.assertEqual(smart_merge_field(once, "Jane Roe", self.PLACEHOLDERS), once)


class NormalizeSectionsTests(unittest.TestCase):
    def test_aliases_and_unknown_names(self):
        self.assertEqual(
            normalize_sections(["personal", "Skills", "personalInfo", "unknown", " summary "]),
            ["personalInfo", "skills", "summary"],
        )


class MergeDraftIntoDocumentTests(unittest.TestCase):
    def _starter_document(self) -> ResumeBuilderData:
        return ResumeBuilderData(
            personal_info=PersonalInfo(full_name="DUSTIN DINSMORE", email="kept@example.com"),
            summary="Recent graduate with experience in web development and design.",
            experience=[Experience(company="ABC Company", position="Intern")],
            education=[Education(institution="San Diego State University")],
            skills=[Skill(name="JavaScript"), Skill(name="Problem Solving")],
        )

    def _draft(self) -> ResumeBuilderData:
        return ResumeBuilderData(
            personal_info=PersonalInfo(full_name="Ada Lovelace", email="ada@example.com", phone="555-0100"),
            summary="Engineer focused on analytical engines.",
            experience=[Experience(company="Analytical Engines Ltd", position="Engineer")],
            education=[Education(institution="University of London")],
            skills=[Skill(name="Mathematics", level="expert")],
            settings=BuilderSettings(layout="2-page", template="modern"),
        )

    def test_starter_content_is_replaced(self):
        merged = merge_draft_into_document(
            self._starter_document(),
            self._draft(),
            ["personalInfo", "summary", "experience", "education", "skills", "settings"],
        )
        self.assertEqual(merged.personal_info.full_name, "Ada Lovelace")
        self.assertEqual(merged.personal_info.email, "kept@example.com")
        self.assertEqual(merged.personal_info.phone, "555-0100")
        self.assertEqual(merged.summary, "Engineer focused on analytical engines.")
        self.assertEqual(merged.experience[0].company, "Analytical Engines Ltd")
        self.assertEqual(merged.education[0].institution, "University of London")
        self.assertEqual([skill.name for skill in merged.skills], ["Mathematics"])
        self.assertEqual(merged.settings.layout, "2-page")

    def test_user_edits_are_preserved(self):
        current = ResumeBuilderData(
            personal_info=PersonalInfo(full_name="Grace Hopper"),
            summary="My own summary.",
            experience=[Experience(company="Navy")],
            skills=[Skill(name="COBOL"), Skill(name="JavaScript")],
        )
        merged = merge_draft_into_document(
            current, self._draft(), ["personal", "summary", "experience", "skills", "education"]
        )
        self.assertEqual(merged.personal_info.full_name, "Grace Hopper")
        self.assertEqual(merged.personal_info.email, "ada@example.com")
        self.assertEqual(merged.summary, "My own summary.")
        self.assertEqual(merged.experience[0].company, "Navy")
        self.assertEqual([skill.name for skill in merged.skills], ["COBOL", "JavaScript"])
        self.assertEqual(merged.education[0].institution, "University of London")

    def test_unselected_sections_untouched_and_inputs_not_mutated(self):
        current = self._starter_document()
        draft = self._draft()
        merged = merge_draft_into_document(current, draft, ["summary"])
        self.assertEqual(merged.experience[0].company, "ABC Company")
        self.assertEqual(current.summary, "Recent graduate with experience in web development and design.")
        self.assertEqual(draft.summary, "Engineer focused on analytical engines.")
        merged.experience[0].company = "Changed"
        self.assertEqual(current.experience[0].company, "ABC Company")

    def test_projects_only_fill_when_empty(self):
        draft = self._draft().model_copy(update={"projects": []})
        merged = merge_draft_into_document(ResumeBuilderData(), draft, ["projects"])
        self.assertEqual(merged.projects, [])


if __name__ == "__main__":
    unittest.main()
