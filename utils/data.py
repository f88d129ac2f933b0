"""
Data Management Module - Loads the static JSON content fixtures
Each fixture is read from DATA_DIR on request and validated against its model
"""

import json
import os
from typing import List

from flask import current_app
from pydantic import TypeAdapter, ValidationError

from models import Certificate, Profile, Project
from .errors import FixtureError

FIXTURES = {
    'profile': TypeAdapter(Profile),
    'projects': TypeAdapter(List[Project]),
    'certificates': TypeAdapter(List[Certificate]),
}


def fixture_path(name, data_dir=None):
    """Resolve the JSON file for a fixture name"""
    data_dir = data_dir or current_app.config['DATA_DIR']
    return os.path.join(data_dir, f'{name}.json')


def load_fixture(name, data_dir=None):
    """
    Load and validate one content fixture.

    Args:
        name (str): 'profile', 'projects' or 'certificates'
        data_dir (str, optional): Override for the configured DATA_DIR

    Returns:
        Profile | list[Project] | list[Certificate]

    Raises:
        FixtureError: file missing, invalid JSON or required fields absent
    """
    if name not in FIXTURES:
        raise FixtureError(name, 'unknown fixture')

    path = fixture_path(name, data_dir)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise FixtureError(name, f'file not found at {path}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FixtureError(name, f'invalid JSON ({e})')

    try:
        return FIXTURES[name].validate_python(raw)
    except ValidationError as e:
        problems = '; '.join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise FixtureError(name, problems)


def load_profile(data_dir=None):
    return load_fixture('profile', data_dir)


def load_projects(data_dir=None):
    return load_fixture('projects', data_dir)


def load_certificates(data_dir=None):
    return load_fixture('certificates', data_dir)


def unique_in_order(values):
    """Deduplicate while preserving first-seen order"""
    return list(dict.fromkeys(values))


def filter_projects(projects, technology=None):
    """Projects using a technology; all projects for None or 'All'"""
    if not technology or technology == 'All':
        return list(projects)
    return [p for p in projects if technology in p.technologies]


def project_technologies(projects):
    """Filter options for the projects page, 'All' first"""
    return ['All'] + unique_in_order(t for p in projects for t in p.technologies)


def filter_certificates(certificates, category=None):
    """Certificates in a category; all certificates for None or 'All'"""
    if not category or category == 'All':
        return list(certificates)
    return [c for c in certificates if c.category == category]


def certificate_categories(certificates):
    """Filter options for the certificates page, 'All' first"""
    return ['All'] + unique_in_order(c.category for c in certificates)


__all__ = [
    'load_fixture',
    'load_profile',
    'load_projects',
    'load_certificates',
    'filter_projects',
    'project_technologies',
    'filter_certificates',
    'certificate_categories',
]
