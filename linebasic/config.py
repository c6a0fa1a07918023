"""
LineBASIC - config.py
Configuration file and command-line options parser

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import sys
import logging
import configparser
from collections import deque


# user configuration directory
USER_CONFIG_HOME = os.environ.get('XDG_CONFIG_HOME') or os.path.join(
    os.path.expanduser('~'), '.config'
)
USER_CONFIG_DIR = os.path.join(USER_CONFIG_HOME, 'linebasic')

# default config file name
CONFIG_NAME = 'LINEBASIC.INI'

# user and local config files
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, CONFIG_NAME)

# format for log files
LOGGING_FORMAT = '[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt='%H:%M:%S')

# bool strings
TRUES = ('YES', 'TRUE', 'ON', '1')
FALSES = ('NO', 'FALSE', 'OFF', '0')

# by default, load what's in section [linebasic] and override with anything
DEFAULT_SECTION = ['linebasic']


##############################################################################
# short-form arguments

SHORT_ARGS = {
    'd': ('debug', 'True'),
    'h': ('help', 'True'),
    'i': ('interact', 'True'),
    'v': ('version', 'True'),
    'e': ('exec', None),
}

# number of positional arguments
NUM_POSITIONAL = 1

ARGUMENTS = {
    'program': {'type': 'string', 'default': '', },
    # statements given more than once are separated by newlines
    'exec': {'type': 'string', 'default': '', 'separator': '\n', },
    'interact': {'type': 'bool', 'default': False, },
    'greeting': {'type': 'bool', 'default': True, },
    'debug': {'type': 'bool', 'default': False, },
    'logfile': {'type': 'string', 'default': '', },
    'config': {'type': 'string', 'default': '', },
    'preset': {'type': 'string', 'default': '', },
    'version': {'type': 'bool', 'default': False, },
    'help': {'type': 'bool', 'default': False, },
}


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # include messages from warnings module in the logs
        logging.captureWarnings(True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Reset root logger."""
        root_logger = logging.getLogger()
        # remove all old handlers: temporary ones we set as well as any default ones
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Set up the global logger."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        logstream = sys.stderr
        if logfile:
            try:
                logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
            except EnvironmentError as e:
                sys.stderr.write('Could not open log file `%s`: %s\n' % (logfile, e))
        # write out cached logs
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##############################################################################
# settings

class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments):
        """Initialise settings."""
        if not arguments:
            self._uargv = sys.argv[1:]
        else:
            self._uargv = list(arguments)
        lumberjack = Lumberjack()
        try:
            self._options = ArgumentParser().retrieve_options(self._uargv)
        except BaseException:
            # avoid losing exception messages occurring while logging was disabled
            lumberjack.reset()
            raise
        # prepare global logger for use by main program
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Get value of option; choose whether to get default or None (unspecified)."""
        try:
            value = self._options[name]
            if get_default and (value is None or value == ''):
                raise KeyError
        except KeyError:
            if get_default:
                try:
                    value = ARGUMENTS[name]['default']
                except KeyError:
                    if name in range(NUM_POSITIONAL):
                        return ''
                    raise
            else:
                value = None
        return value

    @property
    def launch_params(self):
        """Dict of launch parameters."""
        prog = self.get('program') or self.get(0)
        commands = [_cmd for _cmd in self.get('exec').split('\n') if _cmd.strip()]
        # without a program or statements, start the editor
        interact = self.get('interact') or not (prog or commands)
        return {
            'prog': prog,
            'commands': commands,
            'interact': interact,
            # following GW, don't greet if there is something to run
            'greeting': interact and not (prog or commands) and self.get('greeting'),
        }

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Parse LineBASIC config file and command-line arguments."""

    def retrieve_options(self, uargv):
        """Retrieve command line and option file options."""
        # convert command line arguments to string dictionary form
        remaining = self._get_arguments_dict(uargv)
        # get preset groups from specified config file
        preset_dict = self._parse_config_arg_and_process_config_file(remaining)
        # set defaults based on presets
        args = self._parse_presets(remaining, preset_dict)
        # find unrecognised arguments
        for key, value in args.items():
            if key not in ARGUMENTS:
                logging.warning(
                    'Ignored unrecognised option `%s=%s` in configuration file', key, value
                )
        args = {_k: _v for _k, _v in args.items() if _k in ARGUMENTS}
        # parse rest of command line args
        cmd_line_args = self._parse_args(remaining)
        # command-line args override config file settings
        args.update(cmd_line_args)
        # clean up arguments
        return {_k: self._parse_type(_k, _v) for _k, _v in args.items()}

    def _append_short_args(self, args, key, value):
        """Append short arguments and value to dict."""
        long_arg_value = None
        for i, short_arg in enumerate(key[1:]):
            try:
                long_arg, long_arg_value = SHORT_ARGS[short_arg]
            except KeyError:
                logging.warning('Ignored unrecognised option `-%s`', short_arg)
            else:
                if i == len(key)-2:
                    # assign provided value to last argument specified
                    self._append_arg(args, long_arg, long_arg_value or value or '')
                else:
                    self._append_arg(args, long_arg, long_arg_value or '')
        # if value provided not used, push back as positional
        if long_arg_value and value:
            return value
        return None

    def _append_arg(self, args, key, value):
        """Update a single argument; repeated list-type arguments are joined."""
        if not value:
            # if we call _append_arg it means the key may be empty but is at least specified
            value = ''
        separator = ARGUMENTS.get(key, {}).get('separator')
        if separator and args.get(key):
            if value:
                args[key] += separator + value
        else:
            args[key] = value

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary."""
        args = {}
        arg_deque = deque(argv)
        # positional arguments
        pos = 0
        # use -- to end option parsing, everything is a positional argument afterwards
        options_ended = False
        while arg_deque:
            arg = arg_deque.popleft()
            if not arg.startswith('-') or arg == '-' or options_ended:
                # not an option flag, interpret as positional
                args[pos] = arg
                pos += 1
            elif arg == '--':
                options_ended = True
            else:
                key, _, value = arg.partition('=')
                if key.startswith('--'):
                    # long option
                    if key[2:]:
                        if not value and key[2:] in ARGUMENTS:
                            if ARGUMENTS[key[2:]]['type'] != 'bool' and arg_deque:
                                # --key value, for options that take a value
                                if not arg_deque[0].startswith('-'):
                                    value = arg_deque.popleft()
                        self._append_arg(args, key[2:], value)
                else:
                    # starts with one dash
                    if not value:
                        # -key value, without = to connect
                        # only use the next value if it does not itself look like an option flag
                        if arg_deque and not arg_deque[0].startswith('-'):
                            value = arg_deque.popleft()
                    unused_value = self._append_short_args(args, key, value)
                    # if the value picked up is not used by the short option, push back as positional.
                    if unused_value:
                        arg_deque.appendleft(unused_value)
        return args

    def _parse_presets(self, remaining, conf_dict):
        """Merge the default section and any presets named with --preset."""
        args = dict(conf_dict.get(DEFAULT_SECTION[0], {}))
        presets = remaining.pop('preset', '') or args.pop('preset', '')
        for preset in presets.split(','):
            if not preset:
                continue
            try:
                args.update(conf_dict[preset])
            except KeyError:
                logging.warning('Ignored undefined preset `%s`', preset)
        args.pop('preset', None)
        return args

    def _parse_config_arg_and_process_config_file(self, remaining):
        """Find the correct config file and read it."""
        # always read the user config file; a local config file overrides it
        conf_dict = {}
        if os.path.exists(USER_CONFIG_PATH):
            conf_dict.update(self._read_config_file(USER_CONFIG_PATH))
        config_file = remaining.pop('config', None)
        if not config_file and os.path.exists(CONFIG_NAME):
            config_file = CONFIG_NAME
        if config_file:
            conf_dict.update(self._read_config_file(config_file))
        return conf_dict

    def _read_config_file(self, config_file):
        """Read config file."""
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(WhitespaceStripper(f))
        except (configparser.Error, IOError):
            logging.warning(
                'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        return {_header: dict(config.items(_header)) for _header in config.sections()}

    def _parse_args(self, remaining):
        """Process command line options."""
        known = list(ARGUMENTS.keys()) + list(range(NUM_POSITIONAL))
        args = {d: remaining[d] for d in remaining if d in known}
        for d in remaining:
            if d in known:
                continue
            if isinstance(d, int):
                logging.warning(
                    'Ignored surplus positional command-line argument #%s: `%s`', d, remaining[d]
                )
            elif remaining[d]:
                logging.warning('Ignored unrecognised command-line argument `%s=%s`', d, remaining[d])
            else:
                logging.warning('Ignored unrecognised command-line argument `%s`', d)
        return args

    ##########################################################################
    # type conversions

    def _parse_type(self, d, arg):
        """Convert argument to required type."""
        if d not in ARGUMENTS or arg is None:
            return arg
        if ARGUMENTS[d]['type'] == 'bool':
            return self._to_bool(d, arg)
        return arg

    def _to_bool(self, argname, strval):
        """Convert bool string to bool. Empty string (i.e. specified) means True."""
        if strval == '':
            return True
        if strval.upper() in TRUES:
            return True
        elif strval.upper() in FALSES:
            return False
        logging.warning(
            'Boolean option `%s=%s` interpreted as `%s=True`', argname, strval, argname
        )
        return True


##############################################################################
# utilities

class WhitespaceStripper(object):
    """File wrapper for ConfigParser that strips leading whitespace."""

    def __init__(self, file):
        """Initialise to file object."""
        self._file = file

    def readline(self):
        """Read a line and strip whitespace (but not EOL)."""
        return self._file.readline().lstrip(' \t')

    def __next__(self):
        line = self.readline()
        if not line:
            raise StopIteration()
        return line

    def __iter__(self):
        return self
