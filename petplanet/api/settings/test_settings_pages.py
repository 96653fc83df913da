# petplanet/api/settings/test_settings_pages.py
from petplanet.api.settings.pages import SettingsPage

SETTINGS = {
    'appearance': {'theme': 'default'},
    'notifications': {'push': True, 'email': False},
    'privacy': {'contentVisibility': 'public'},
}


def test_load_settings(services, fake_http):
    fake_http.on('GET', '/settings', {'data': SETTINGS})
    page = SettingsPage(services)
    page.load()
    assert page.to_view()['settings']['appearance'] == {'theme': 'default'}


def test_section_save_merges_locally_without_server_record(services, fake_http):
    fake_http.on('GET', '/settings', {'data': SETTINGS})
    fake_http.on('PUT', '/settings/appearance', {'success': True})
    page = SettingsPage(services)
    page.load()

    assert page.save({'theme': 'dark'}, section='appearance') is True

    assert fake_http.find('PUT', '/settings/appearance')[0]['json'] == {'theme': 'dark'}
    assert page.settings['appearance'] == {'theme': 'dark'}
    assert page.settings['privacy'] == {'contentVisibility': 'public'}
    assert page.to_view()['message'] == '设置已保存'


def test_full_save_uses_server_record(services, fake_http):
    saved = dict(SETTINGS, privacy={'contentVisibility': 'private'})
    fake_http.on('PUT', '/settings', {'success': True, 'data': saved})
    page = SettingsPage(services)

    page.save({'privacy': {'contentVisibility': 'private'}})

    assert page.settings == saved


def test_save_failure_shows_server_message(services, fake_http):
    fake_http.on('PUT', '/settings/privacy', {'message': '参数错误'}, status=400)
    page = SettingsPage(services)
    assert page.save({'showLocation': True}, section='privacy') is False
    assert page.error == '参数错误'
    assert page.to_view()['message'] is None
