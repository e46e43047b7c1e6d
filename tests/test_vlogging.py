from jpdatekit import vlogging

def test_get_level_by_argv_default():
    assert vlogging.get_level_by_argv(['format', '0']) == (vlogging.INFO, ['format', '0'])

def test_get_level_by_argv_strips_flags():
    (level, argv) = vlogging.get_level_by_argv(['--debug', 'parse', 'x', '--quiet'])
    assert level == vlogging.DEBUG
    assert argv == ['parse', 'x']

def test_get_level_by_argv_loud_and_silent():
    assert vlogging.get_level_by_argv(['--loud'])[0] == vlogging.LOUD
    assert vlogging.get_level_by_argv(['--silent'])[0] == vlogging.SILENT

def test_get_logger_main_fallback():
    log = vlogging.get_logger('__main__', 'jpdate')
    assert log.name == 'jpdate'
    assert callable(log.loud)

def test_get_level_by_argv_does_not_modify_input():
    argv = ['--debug', 'now']
    vlogging.get_level_by_argv(argv)
    assert argv == ['--debug', 'now']

def test_get_level_by_argv_priority_ignores_position():
    assert vlogging.get_level_by_argv(['--quiet', 'now', '--loud'])[0] == vlogging.LOUD
    assert vlogging.get_level_by_argv(['--silent', '--warning'])[0] == vlogging.WARNING
    assert vlogging.get_level_by_argv(['--quiet', '--debug'])[1] == []
