import subprocess
import sys

CLI_CMD = [sys.executable, '-m', 'fluentdt']

def run_cli(args):
    result = subprocess.run(
        CLI_CMD + args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE
    )
    return result

def test_cli_week_international():
    result = run_cli(['week', '2018-12-31'])
    assert result.stdout.decode().strip() == '2019/01'
    assert result.returncode == 0

def test_cli_week_german():
    result = run_cli(['week', '01.01.2021', '--rule', 'german'])
    assert result.stdout.decode().strip() == '2020/53'
    assert result.returncode == 0

def test_cli_week_locale_rule():
    result = run_cli(['week', '2018-12-30', '--locale', 'en_US'])
    assert result.stdout.decode().strip() == '2019/01'
    result = run_cli(['week', '2018-12-30', '--first-day', '6', '--min-days', '1'])
    assert result.stdout.decode().strip() == '2019/01'

def test_cli_monday():
    result = run_cli(['monday', '01/2014'])
    assert result.stdout.decode().strip() == '2013-12-30'
    assert result.returncode == 0

def test_cli_add_negative():
    result = run_cli(['add', '2018/01', '-53'])
    assert result.stdout.decode().strip() == '2016/52'
    assert result.returncode == 0

def test_cli_diff():
    result = run_cli(['diff', '2013/02', '2015/01'])
    assert result.stdout.decode().strip() == '-103'

def test_cli_invalid_token_fails():
    result = run_cli(['monday', '2018/1'])
    assert result.returncode == 1
    assert 'Error:' in result.stderr.decode()

def test_cli_invalid_date_fails():
    result = run_cli(['week', 'yesterday'])
    assert result.returncode == 1
    assert 'Could not parse date string' in result.stderr.decode()
