"""
Site Routes - Public portfolio pages and the contact form
"""

from flask import current_app, flash, redirect, render_template, request, url_for

from extensions import get_relay_client
from models import ContactSubmission
from utils.data import (
    certificate_categories,
    filter_certificates,
    filter_projects,
    load_certificates,
    load_profile,
    load_projects,
    project_technologies,
)
from utils.errors import RelayError
from utils.validators import CONTACT_FIELDS, clean_contact_data, validate_contact_form
from . import site_bp

SUCCESS_MESSAGE = "Thank you! Your message has been sent successfully. I'll get back to you soon."
DEMO_MESSAGE = 'Message received! (Backend not connected - this is a demo)'


@site_bp.route('/')
def index():
    """Landing page - hero, bio preview and quick stats"""
    profile = load_profile()
    stats = {
        'projects': len(load_projects()),
        'certificates': len(load_certificates()),
        'experience': len(profile.experience),
    }
    return render_template('home.html', profile=profile, stats=stats)


@site_bp.route('/about')
def about():
    """Profile, skills, experience and education"""
    return render_template('about.html', profile=load_profile())


@site_bp.route('/projects')
def projects():
    """Project list with a technology filter"""
    all_projects = load_projects()
    selected = request.args.get('tech', 'All')
    featured = [p for p in all_projects if p.featured] if selected == 'All' else []
    return render_template('projects.html',
                           projects=filter_projects(all_projects, selected),
                           technologies=project_technologies(all_projects),
                           selected=selected,
                           featured=featured)


@site_bp.route('/certificates')
def certificates():
    """Certificate list with a category filter"""
    all_certificates = load_certificates()
    selected = request.args.get('category', 'All')
    return render_template('certificates.html',
                           certificates=filter_certificates(all_certificates, selected),
                           categories=certificate_categories(all_certificates),
                           selected=selected,
                           total=len(all_certificates))


def render_contact(form=None, errors=None, status=200):
    return render_template('contact.html',
                           profile=load_profile(),
                           form=form or {field: '' for field in CONTACT_FIELDS},
                           errors=errors or {}), status


@site_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact page; POST validates locally, then submits to the relay"""
    if request.method == 'GET':
        return render_contact()

    data = clean_contact_data(request.form)
    errors = validate_contact_form(data)
    if errors:
        return render_contact(form=data, errors=errors, status=400)

    submission = ContactSubmission(**data)
    try:
        get_relay_client().send_contact_form(submission)
    except RelayError as e:
        cause = e.__cause__ or e
        if current_app.config.get('CONTACT_DEMO_MODE'):
            current_app.logger.warning(f"Relay unavailable, demo mode keeps the form usable: {str(cause)}")
            flash(DEMO_MESSAGE, 'success')
            return redirect(url_for('site.contact'))
        current_app.logger.error(f"Error sending contact form: {str(cause)}")
        flash(e.message, 'error')
        return render_contact(form=data, status=502)

    flash(SUCCESS_MESSAGE, 'success')
    return redirect(url_for('site.contact'))
