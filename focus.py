from utils import call_by_name


class FocusTarget:
    def actions(self):
        return sorted(name[7:] for name in dir(self) if name.startswith('action_'))

    def on_action(self, action):
        return call_by_name(self, f'action_{action}')
