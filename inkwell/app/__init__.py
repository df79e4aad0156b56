"""Application layer: controllers, wiring and Tk keyboard glue.

``services`` builds adapters and use cases from ``config``;
``editor_controller`` owns the view's ``ActionDispatcher`` registrations;
``keyboard_tk`` routes Tk key presses into the dispatcher.
"""
