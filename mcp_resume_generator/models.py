from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_SECTIONS: List[str] = [
    "templates",
    "profile",
    "awards",
    "work",
    "skills",
    "education",
    "projects",
]


class ResumeModel(BaseModel):
    """Base for resume parts: camelCase on the wire, unknown keys passed through."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Headings(ResumeModel):
    awards: str = "Introduction"
    work: str = "Work Experience"
    education: str = "Education"
    skills: str = "Skills"
    projects: str = "Projects"


class Location(ResumeModel):
    address: str = Field("", description="Address or city")


class Basics(ResumeModel):
    name: str = Field("", description="Full name")
    email: str = Field("", description="Email address")
    phone: str = Field("", description="Phone number")
    website: str = Field("", description="Personal website or portfolio")
    location: Location = Field(default_factory=Location)


class WorkEntry(ResumeModel):
    company: str = ""
    location: str = ""
    position: str = ""
    website: str = ""
    start_date: str = ""
    end_date: str = ""
    highlights: List[str] = Field(default_factory=list)


class SkillEntry(ResumeModel):
    name: str = Field("", description="Skill category")
    level: str = Field("", description="Proficiency level")
    keywords: List[str] = Field(default_factory=list)


class ProjectEntry(ResumeModel):
    name: str = ""
    description: str = ""
    url: str = ""
    keywords: List[str] = Field(default_factory=list)


class EducationEntry(ResumeModel):
    institution: str = ""
    location: str = ""
    area: str = Field("", description="Field of study")
    study_type: str = Field("", description="Degree type (e.g., Bachelor, Master)")
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""


class AwardEntry(ResumeModel):
    date: str = ""
    awarder: str = ""
    summary: str = ""


class ResumeData(ResumeModel):
    """Complete document submitted to the rendering API."""

    selected_template: int = Field(1, description="Template number (1-10)")
    headings: Headings = Field(default_factory=Headings)
    basics: Basics = Field(default_factory=Basics)
    work: List[WorkEntry] = Field(default_factory=list)
    skills: List[SkillEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    awards: List[AwardEntry] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=lambda: list(DEFAULT_SECTIONS))

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def placeholder_template(template_number: int = 1) -> ResumeData:
    """Resume skeleton with bracketed placeholders for every field."""
    return ResumeData(
        selected_template=template_number,
        basics=Basics(
            name="[Your Full Name]",
            email="[your.email@example.com]",
            phone="[Your Phone Number]",
            website="[Your Website/LinkedIn]",
            location=Location(address="[Your City, State]"),
        ),
        work=[
            WorkEntry(
                company="[Company Name]",
                location="[City, State]",
                position="[Job Title]",
                website="[Company Website]",
                start_date="[Start Date]",
                end_date="[End Date]",
                highlights=[
                    "[Key achievement or responsibility]",
                    "[Another achievement with metrics if possible]",
                    "[Third achievement or skill demonstrated]",
                ],
            )
        ],
        skills=[
            SkillEntry(
                name="[Skill Category]",
                level="[Proficiency Level]",
                keywords=["[Specific Skill 1]", "[Specific Skill 2]", "[Specific Skill 3]"],
            )
        ],
        projects=[
            ProjectEntry(
                name="[Project Name]",
                description="[Brief project description and your role]",
                url="[Project URL if available]",
                keywords=["[Technology Used]", "[Skill Demonstrated]"],
            )
        ],
        education=[
            EducationEntry(
                institution="[University Name]",
                location="[City, State]",
                area="[Your Major]",
                study_type="[Degree Type]",
                start_date="[Start Date]",
                end_date="[End Date]",
                gpa="[GPA if relevant]",
            )
        ],
        awards=[AwardEntry(summary="[Personal introduction or objective statement]")],
    )
