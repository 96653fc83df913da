# petplanet/api/settings/routes.py
from flask import Blueprint, abort, current_app
from marshmallow import ValidationError

from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.api.settings.pages import SECTION_UPDATERS, SettingsPage
from petplanet.api.settings.schemas import (
    AppearanceSchema, NotificationsSchema, PrivacySchema, SettingsSchema
)
from petplanet.core.security import login_required

settings_bp = Blueprint('settings_bp', __name__)

SECTION_SCHEMAS = {
    'appearance': AppearanceSchema,
    'notifications': NotificationsSchema,
    'privacy': PrivacySchema,
}


@settings_bp.route('/settings', methods=['GET'])
@login_required
def get_settings():
    with SettingsPage(current_app.services) as page:
        page.load()
        return page_view(page)


@settings_bp.route('/settings', methods=['PUT'])
@login_required
def update_settings():
    try:
        data = SettingsSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with SettingsPage(current_app.services) as page:
        if not page.save(data):
            return page_error(page, "SETTINGS_UPDATE_FAILED")
        return page_view(page)


@settings_bp.route('/settings/<string:section>', methods=['PUT'])
@login_required
def update_section(section: str):
    if section not in SECTION_UPDATERS:
        abort(404)
    try:
        data = SECTION_SCHEMAS[section]().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with SettingsPage(current_app.services) as page:
        page.load()
        if not page.save(data, section):
            return page_error(page, "SETTINGS_UPDATE_FAILED")
        return page_view(page)
