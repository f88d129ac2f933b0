"""
Data models for the contact submission and the static content fixtures.

Fixture models give every optional field a default so a sparse JSON file
renders with empty sections instead of breaking a page; required fields
(profile name, project/certificate id and title) fail validation.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ContactSubmission(BaseModel):
    """A validated contact-form submission. Lives for one request only."""

    name: str
    email: str
    subject: str
    message: str


class SkillCategory(BaseModel):
    category: str = ''
    items: List[str] = Field(default_factory=list)


class Experience(BaseModel):
    title: str = ''
    company: str = ''
    period: str = ''
    description: str = ''


class Education(BaseModel):
    degree: str = ''
    institution: str = ''
    period: str = ''
    description: str = ''


class Profile(BaseModel):
    name: str
    title: str = ''
    bio: str = ''
    email: str = ''
    phone: str = ''
    location: str = ''
    avatar: Optional[str] = None
    resume: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    skills: List[SkillCategory] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)


class Project(BaseModel):
    id: Union[int, str]
    title: str
    description: str = ''
    image: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    github: Optional[str] = None
    demo: Optional[str] = None
    featured: bool = False


class Certificate(BaseModel):
    id: Union[int, str]
    title: str
    issuer: str = ''
    date: str = ''
    category: str = 'Other'
    description: str = ''
    image: Optional[str] = None
    link: Optional[str] = None
