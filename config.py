import os
import atexit
import json
from utils import ctrl
from configparser import ConfigParser

app = None


def get_app():
    return app


def generate_default_keymap(path: str):
    mapping = {
        'KEY_UP': 'up',
        'KEY_DOWN': 'down',
        'KEY_LEFT': 'left',
        'KEY_RIGHT': 'right',
        'KEY_ENTER': 'enter',
        '\n': 'enter',
        '\r': 'enter',
        'KEY_F(12)': 'quit',
        ctrl('C'): 'copy',
        ctrl('Q'): 'quit',
    }
    with open(path, 'w') as fo:
        json.dump(mapping, fo, indent=4)
    return mapping


def key_name(key: str) -> str:
    return keymap.get(key, key)


def get_value(name, default=''):
    if name not in section:
        section[name] = default
    return section.get(name)


def get_int(name, default=0):
    return int(get_value(name, str(default)))


def get_bool(name, default=False):
    return get_value(name, str(default)) != 'False'


def set_value(name, value):
    section[name] = str(value)


def save_cfg():
    with open(cfg_path, 'w') as configfile:
        cfg.write(configfile)


class Constants:
    def __init__(self):
        self.values = {
            'LIST_CONTENT_LIMIT': max(0, get_int('list_content_limit', 100)),
            'LIST_LOAD_MORE': max(1, get_int('list_load_more', 20)),
        }
        self.create_fields()

    def create_fields(self):
        for field in sorted(self.values.keys()):
            setattr(self, field, self.values.get(field))


cfg_dir = os.environ.get('TERMLIST_CONFIG_DIR', os.path.join(os.path.expanduser('~'), '.termlist'))
os.makedirs(cfg_dir, 0o755, True)
cfg_path = os.path.join(cfg_dir, 'termlist.ini')
keymap_path = os.path.join(cfg_dir, 'keymap.json')
log_path = os.path.join(cfg_dir, 'termlist.log')
cfg = ConfigParser()
cfg['config'] = {}
section = cfg['config']
if os.path.exists(keymap_path):
    with open(keymap_path) as f:
        keymap = json.load(f)
else:
    keymap = generate_default_keymap(keymap_path)

atexit.register(save_cfg)


def load_cfg():
    global logging, const
    cfg.read(cfg_path)
    logging = get_bool('logging', False)
    const = Constants()


logging = False
const = None
load_cfg()
