"""Modelos de datos del análisis (pydantic, inmutables)."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

EMAIL_NOT_FOUND = "Email not found"
PHONE_NOT_FOUND = "Phone not found"
LOCATION_NOT_SPECIFIED = "Location not specified"


def fit_band(overall: int) -> str:
    if overall >= 80:
        return "Excellent"
    if overall >= 65:
        return "Good"
    if overall >= 50:
        return "Fair"
    return "Needs Review"


def recommendation_for(overall: int) -> str:
    if overall >= 85:
        return "Highly Recommended"
    if overall >= 70:
        return "Recommended"
    if overall >= 55:
        return "Consider"
    return "Not Recommended"


class CandidateFacts(BaseModel):
    """Datos del candidato extraídos del texto.

    La ausencia es `None`, nunca cadena vacía.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    @property
    def email_display(self) -> str:
        return self.email if self.email is not None else EMAIL_NOT_FOUND

    @property
    def phone_display(self) -> str:
        return self.phone if self.phone is not None else PHONE_NOT_FOUND

    @property
    def location_display(self) -> str:
        return self.location if self.location is not None else LOCATION_NOT_SPECIFIED


class SkillSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: List[str] = Field(default_factory=list)
    cv: List[str] = Field(default_factory=list)
    matched: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(default_factory=list)

    @property
    def missing(self) -> List[str]:
        matched = set(self.matched)
        return [s for s in self.required if s not in matched]


class ScoreBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills_score: int = Field(ge=0, le=100)
    experience_score: int = Field(ge=0, le=100)
    education_score: int = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)

    @property
    def band(self) -> str:
        return fit_band(self.overall_score)

    @property
    def recommendation(self) -> str:
        return recommendation_for(self.overall_score)


class Narrative(BaseModel):
    model_config = ConfigDict(frozen=True)

    strengths: List[str]
    weaknesses: List[str]
    summary: str


class AnalysisResult(BaseModel):
    """Resultado completo de un análisis. Se crea por llamada y no se guarda."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    facts: CandidateFacts
    skills: SkillSet
    scores: ScoreBundle
    narrative: Narrative
    match_percentage: int = Field(ge=0, le=100)

    @property
    def strengths(self) -> List[str]:
        return self.narrative.strengths

    @property
    def weaknesses(self) -> List[str]:
        return self.narrative.weaknesses

    @property
    def summary(self) -> str:
        return self.narrative.summary

    def to_payload(self) -> Dict[str, Any]:
        """Forma plana (camelCase) que consume el front end web."""
        facts = self.facts
        return {
            "name": facts.name,
            "email": facts.email,
            "phone": facts.phone,
            "score": self.scores.overall_score,
            "skillsMatch": self.scores.skills_score,
            "experienceMatch": self.scores.experience_score,
            "educationMatch": self.scores.education_score,
            "recommendation": self.scores.recommendation,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "summary": self.summary,
            "skillsMatched": list(self.skills.matched),
            "skillsMissing": self.skills.missing,
            "jdRequiredSkills": list(self.skills.required),
            "cvSkills": list(self.skills.cv),
            "analysisData": {
                "personal": {
                    "name": facts.name,
                    "email": facts.email_display,
                    "phone": facts.phone_display,
                    "location": facts.location_display,
                },
                "skills": list(self.skills.cv) + list(self.skills.soft_skills),
                "match_analysis": {
                    "skills_matched": list(self.skills.matched),
                    "skills_missing": self.skills.missing,
                    "strengths": list(self.strengths),
                    "concerns": list(self.weaknesses),
                },
                "summary": self.summary,
            },
        }
