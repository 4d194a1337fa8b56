# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Built-in presentation definitions seeded into the template registry.

Each template is Jinja2 markup rendered by HTMLRenderer. Available context:
``cv``, ``personal``, ``full_name``, ``contact`` [(label, value)],
``skill_groups`` [(category, [skill])], ``titles`` and ``sections``; helpers
``date_range(start, end, ongoing)`` and ``has_dates(...)``; filters
``month_year`` and ``skill_weight``. Every section must sit behind its
``sections.<key>`` guard.
"""

from cv_builder.models import Template

# --- Shared fragments ---------------------------------------------------------

_CONTACT = """
<div class="contact-info">
  {% for label, value in contact %}<div class="contact-item" data-label="{{ label }}">{{ value }}</div>{% endfor %}
</div>
"""

_SUMMARY = """
{% if sections.summary %}
<section class="cv-section summary-section">
  <h2>{{ titles.summary }}</h2>
  <p class="summary-text">{{ cv.summary }}</p>
</section>
{% endif %}
"""

_EXPERIENCE = """
{% if sections.experience %}
<section class="cv-section experience-section">
  <h2>{{ titles.experience }}</h2>
  {% for exp in cv.experience %}
  <div class="experience-item">
    <div class="item-header">
      <h3>{{ exp.job_title }}</h3>
      {% if has_dates(exp.start_date, exp.end_date, exp.is_current) %}<span class="date-range">{{ date_range(exp.start_date, exp.end_date, exp.is_current) }}</span>{% endif %}
    </div>
    <div class="item-meta"><strong>{{ exp.company }}</strong>{% if exp.location %} &bull; {{ exp.location }}{% endif %}</div>
    {% if exp.description %}<p class="description">{{ exp.description }}</p>{% endif %}
    {% if exp.achievements %}
    <ul class="achievements">
      {% for item in exp.achievements %}<li>{{ item }}</li>{% endfor %}
    </ul>
    {% endif %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_PROJECTS = """
{% if sections.projects %}
<section class="cv-section projects-section">
  <h2>{{ titles.projects }}</h2>
  {% for project in cv.projects %}
  <div class="project-item">
    <div class="item-header">
      <h3>{{ project.name }}</h3>
      {% if has_dates(project.start_date, project.end_date, project.is_ongoing) %}<span class="date-range">{{ date_range(project.start_date, project.end_date, project.is_ongoing) }}</span>{% endif %}
    </div>
    {% if project.description %}<p class="description">{{ project.description }}</p>{% endif %}
    {% if project.technologies %}<div class="technologies"><strong>Technologies:</strong> {{ project.technologies|join(', ') }}</div>{% endif %}
    {% if project.highlights %}
    <ul class="highlights">
      {% for item in project.highlights %}<li>{{ item }}</li>{% endfor %}
    </ul>
    {% endif %}
    {% if project.project_url or project.repository_url %}
    <div class="links">
      {% if project.project_url %}<a href="{{ project.project_url }}">{{ project.project_url }}</a>{% endif %}
      {% if project.repository_url %}<a href="{{ project.repository_url }}">{{ project.repository_url }}</a>{% endif %}
    </div>
    {% endif %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_EDUCATION = """
{% if sections.education %}
<section class="cv-section education-section">
  <h2>{{ titles.education }}</h2>
  {% for edu in cv.education %}
  <div class="education-item">
    <div class="item-header">
      <h3>{{ edu.degree }}{% if edu.field_of_study %} in {{ edu.field_of_study }}{% endif %}</h3>
      {% if has_dates(edu.start_date, edu.end_date, edu.is_current) %}<span class="date-range">{{ date_range(edu.start_date, edu.end_date, edu.is_current) }}</span>{% endif %}
    </div>
    <div class="institution">{{ edu.institution }}{% if edu.location %}, {{ edu.location }}{% endif %}</div>
    {% if edu.gpa %}<div class="gpa">GPA: {{ edu.gpa }}</div>{% endif %}
    {% if edu.achievements %}
    <ul class="achievements">
      {% for item in edu.achievements %}<li>{{ item }}</li>{% endfor %}
    </ul>
    {% endif %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_SKILL_BARS = """
{% if sections.skills %}
<section class="cv-section skills-section">
  <h2>{{ titles.skills }}</h2>
  {% for category, skills in skill_groups %}
  <div class="skill-category">
    <h4>{{ category }}</h4>
    {% for skill in skills %}
    <div class="skill-item">
      <span class="skill-name">{{ skill.name }}</span>
      <div class="skill-level-bar"><div class="skill-progress" style="width: {{ skill.level|skill_weight }}%"></div></div>
    </div>
    {% endfor %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_SKILL_TAGS = """
{% if sections.skills %}
<section class="cv-section skills-section">
  <h2>{{ titles.skills }}</h2>
  {% for category, skills in skill_groups %}
  <div class="skill-category">
    <h4>{{ category }}</h4>
    <div class="skill-items">
      {% for skill in skills %}<span class="skill-item" data-weight="{{ skill.level|skill_weight }}">{{ skill.name }}{% if skill.level %} ({{ skill.level }}){% endif %}</span>{% endfor %}
    </div>
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_CERTIFICATIONS = """
{% if sections.certifications %}
<section class="cv-section certifications-section">
  <h2>{{ titles.certifications }}</h2>
  {% for cert in cv.certifications %}
  <div class="certification-item">
    <h3>{{ cert.name }}</h3>
    {% if cert.issuer %}<div class="issuer">{{ cert.issuer }}</div>{% endif %}
    {% if cert.issue_date %}<div class="date">Issued: {{ cert.issue_date|month_year }}</div>{% endif %}
    {% if cert.expiry_date and not cert.never_expires %}<div class="date">Expires: {{ cert.expiry_date|month_year }}</div>{% endif %}
    {% if cert.credential_id %}<div class="credential">Credential ID: {{ cert.credential_id }}</div>{% endif %}
    {% if cert.credential_url %}<div class="credential"><a href="{{ cert.credential_url }}">{{ cert.credential_url }}</a></div>{% endif %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

_ACHIEVEMENTS = """
{% if sections.achievements %}
<section class="cv-section achievements-section">
  <h2>{{ titles.achievements }}</h2>
  {% for achievement in cv.achievements %}
  <div class="achievement-item">
    <h3>{{ achievement.title }}</h3>
    {% if achievement.organization %}<div class="organization">{{ achievement.organization }}</div>{% endif %}
    {% if achievement.date %}<div class="date">{{ achievement.date|month_year }}</div>{% endif %}
    {% if achievement.description %}<p class="description">{{ achievement.description }}</p>{% endif %}
  </div>
  {% endfor %}
</section>
{% endif %}
"""

# --- Classic Professional -----------------------------------------------------

CLASSIC_HTML = """
<div class="cv-container classic">
  <header class="cv-header">
    {% if personal.profile_image %}<img src="{{ personal.profile_image }}" alt="Profile" class="profile-image">{% endif %}
    <h1 class="name">{{ full_name }}</h1>
""" + _CONTACT + """
  </header>
""" + _SUMMARY + _EXPERIENCE + _PROJECTS + _EDUCATION + _SKILL_BARS + _CERTIFICATIONS + _ACHIEVEMENTS + """
</div>
"""

CLASSIC_CSS = """
.classic { font-family: 'Georgia', 'Times New Roman', serif; color: #2c3e50; }
.classic .cv-header { text-align: center; border-bottom: 2px solid #2c3e50; padding-bottom: 16px; margin-bottom: 24px; }
.classic .profile-image { width: 96px; height: 96px; border-radius: 50%; object-fit: cover; margin-bottom: 8px; }
.classic .name { font-size: 2.4em; letter-spacing: 1px; margin-bottom: 8px; }
.classic .contact-info { display: flex; justify-content: center; flex-wrap: wrap; gap: 16px; color: #666; font-size: 0.9em; }
.classic h2 { border-bottom: 1px solid #bdc3c7; padding-bottom: 4px; margin-bottom: 12px; text-transform: uppercase; font-size: 1.15em; }
.classic .skill-level-bar { height: 6px; background: #ecf0f1; border-radius: 3px; overflow: hidden; }
.classic .skill-progress { height: 100%; background: #2c3e50; }
"""

# --- Modern -------------------------------------------------------------------

MODERN_HTML = """
<div class="cv-container modern">
  <aside class="sidebar">
    <header class="cv-header">
      {% if personal.profile_image %}<img src="{{ personal.profile_image }}" alt="Profile" class="profile-image">{% endif %}
      <h1 class="name">{{ full_name }}</h1>
""" + _CONTACT + """
    </header>
""" + _SKILL_BARS + """
  </aside>
  <main class="main-content">
""" + _SUMMARY + _EXPERIENCE + _PROJECTS + _EDUCATION + _CERTIFICATIONS + _ACHIEVEMENTS + """
  </main>
</div>
"""

MODERN_CSS = """
.modern { display: flex; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; }
.modern .sidebar { width: 32%; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: #fff; padding: 32px 24px; }
.modern .sidebar h2, .modern .sidebar h4 { color: #fff; }
.modern .profile-image { width: 120px; height: 120px; border-radius: 50%; object-fit: cover; display: block; margin: 0 auto 16px; }
.modern .name { font-size: 2em; font-weight: 300; line-height: 1.2; margin-bottom: 16px; }
.modern .contact-item { margin-bottom: 8px; font-size: 0.9em; word-break: break-all; }
.modern .skill-level-bar { height: 4px; background: rgba(255,255,255,0.3); border-radius: 2px; overflow: hidden; }
.modern .skill-progress { height: 100%; background: #fff; }
.modern .main-content { flex: 1; padding: 32px; }
.modern .main-content h2 { font-size: 1.4em; padding-bottom: 8px; border-bottom: 3px solid #667eea; margin-bottom: 16px; }
.modern .item-meta strong, .modern .institution { color: #667eea; }
"""

# --- Executive ----------------------------------------------------------------

EXECUTIVE_HTML = """
<div class="cv-container executive">
  <header class="cv-header">
    <h1 class="name">{{ full_name }}</h1>
    {% if cv.experience %}<div class="headline">{{ cv.experience[0].job_title }}</div>{% endif %}
""" + _CONTACT + """
  </header>
""" + _SUMMARY + _EXPERIENCE + _EDUCATION + _SKILL_TAGS + _PROJECTS + _CERTIFICATIONS + _ACHIEVEMENTS + """
</div>
"""

EXECUTIVE_CSS = """
.executive { font-family: 'Garamond', 'Georgia', serif; color: #1a1a1a; }
.executive .cv-header { background: #1f2a44; color: #fff; padding: 28px 32px; margin-bottom: 24px; }
.executive .name { font-size: 2.6em; font-weight: normal; letter-spacing: 2px; }
.executive .headline { color: #c9a227; font-size: 1.1em; margin: 6px 0 12px; text-transform: uppercase; letter-spacing: 1px; }
.executive .contact-info { display: flex; flex-wrap: wrap; gap: 18px; font-size: 0.9em; color: #d8dce6; }
.executive h2 { color: #1f2a44; border-bottom: 2px solid #c9a227; padding-bottom: 4px; margin-bottom: 12px; font-variant: small-caps; }
.executive .skill-items { display: flex; flex-wrap: wrap; gap: 8px; }
.executive .skill-item { border: 1px solid #1f2a44; padding: 2px 8px; font-size: 0.85em; }
"""

# --- Creative Designer --------------------------------------------------------

CREATIVE_HTML = """
<div class="cv-container creative">
  <header class="cv-header">
    {% if personal.profile_image %}<img src="{{ personal.profile_image }}" alt="Profile" class="profile-image">{% endif %}
    <div class="header-text">
      <h1 class="name">{{ full_name }}</h1>
""" + _CONTACT + """
    </div>
  </header>
""" + _SUMMARY + """
  <div class="two-column">
    <div class="left-column">
""" + _EXPERIENCE + _PROJECTS + """
    </div>
    <div class="right-column">
""" + _SKILL_BARS + _EDUCATION + _CERTIFICATIONS + _ACHIEVEMENTS + """
    </div>
  </div>
</div>
"""

CREATIVE_CSS = """
.creative { font-family: 'Poppins', 'Helvetica Neue', Arial, sans-serif; color: #333; }
.creative .cv-header { display: flex; align-items: center; gap: 24px; background: linear-gradient(120deg, #ff6b6b, #feca57); color: #fff; padding: 28px; border-radius: 12px; margin-bottom: 24px; }
.creative .profile-image { width: 110px; height: 110px; border-radius: 50%; border: 4px solid #fff; object-fit: cover; }
.creative .name { font-size: 2.4em; font-weight: 800; }
.creative .contact-info { display: flex; flex-wrap: wrap; gap: 12px; font-size: 0.9em; }
.creative h2 { color: #ff6b6b; font-size: 1.3em; margin-bottom: 12px; }
.creative .two-column { display: flex; gap: 28px; }
.creative .left-column { flex: 3; }
.creative .right-column { flex: 2; }
.creative .skill-level-bar { height: 8px; background: #ffeaa7; border-radius: 4px; overflow: hidden; }
.creative .skill-progress { height: 100%; background: linear-gradient(90deg, #ff6b6b, #feca57); }
@media print { .creative .two-column { display: block; } }
"""

# --- Tech Minimalist ----------------------------------------------------------

MINIMALIST_HTML = """
<div class="cv-container minimalist">
  <header class="cv-header">
    <h1 class="name">{{ full_name }}</h1>
""" + _CONTACT + """
  </header>
""" + _SUMMARY + _SKILL_TAGS + _EXPERIENCE + _PROJECTS + _EDUCATION + _CERTIFICATIONS + _ACHIEVEMENTS + """
</div>
"""

MINIMALIST_CSS = """
.minimalist { font-family: 'Inter', 'Helvetica', Arial, sans-serif; color: #222; }
.minimalist .cv-header { margin-bottom: 28px; }
.minimalist .name { font-family: 'JetBrains Mono', 'Courier New', monospace; font-size: 2em; }
.minimalist .contact-info { display: flex; flex-wrap: wrap; gap: 14px; font-family: monospace; font-size: 0.85em; color: #555; }
.minimalist h2 { font-family: monospace; font-size: 1em; text-transform: lowercase; color: #0a7; margin-bottom: 10px; }
.minimalist h2::before { content: '# '; }
.minimalist .skill-items { display: flex; flex-wrap: wrap; gap: 6px; }
.minimalist .skill-item { background: #f1f3f5; border-radius: 3px; padding: 2px 6px; font-family: monospace; font-size: 0.8em; }
"""

BUILTIN_TEMPLATES = [
    Template(
        id=1,
        name="Classic Professional",
        category="professional",
        description="A timeless, clean design perfect for traditional industries and corporate roles",
        html_template=CLASSIC_HTML,
        css_styles=CLASSIC_CSS,
    ),
    Template(
        id=2,
        name="Modern",
        category="modern",
        description="A modern and stylish CV template with contemporary design",
        html_template=MODERN_HTML,
        css_styles=MODERN_CSS,
    ),
    Template(
        id=3,
        name="Executive",
        category="professional",
        description="A sophisticated template designed for senior executives and C-level positions",
        html_template=EXECUTIVE_HTML,
        css_styles=EXECUTIVE_CSS,
    ),
    Template(
        id=4,
        name="Creative Designer",
        category="creative",
        description="A vibrant and creative template perfect for designers, artists, and creative professionals",
        html_template=CREATIVE_HTML,
        css_styles=CREATIVE_CSS,
    ),
    Template(
        id=5,
        name="Tech Minimalist",
        category="modern",
        description="A clean, minimal design perfect for developers, engineers, and tech professionals",
        html_template=MINIMALIST_HTML,
        css_styles=MINIMALIST_CSS,
    ),
]
