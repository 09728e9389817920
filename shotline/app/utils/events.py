"""
Minimal in-process event manager. Services emit events after each successful
write. Handlers are plain modules exposing a `handle_event(data)` function,
registered from the event handlers folder set in configuration.
"""
import logging

logger = logging.getLogger(__name__)

handlers = {}


def register(event, name, handler):
    """
    Register an event handler for given event name.
    """
    if event not in handlers:
        handlers[event] = {}
    handlers[event][name] = handler
    return handlers


def unregister(event, name):
    if event in handlers:
        handlers[event].pop(name, None)
    return handlers


def unregister_all():
    handlers.clear()
    return handlers


def register_all(event_map, app=None):
    """
    Register all event handlers listed in given map. Keys are event names,
    values are handler modules.
    """
    for event_name, handler in event_map.items():
        register(event_name, handler.__name__, handler)
        if app is not None:
            app.logger.info(f"Event handler registered for {event_name}")
    return handlers


def emit(event, data=None, project_id=None):
    """
    Emit an event: every handler registered for it is called with given data.
    A failing handler is logged and does not prevent the others from running.
    """
    data = dict(data or {})
    if project_id is not None:
        data["project_id"] = str(project_id)
    logger.debug(f"Event emitted: {event} {data}")

    event_handlers = handlers.get(event, {})
    for name, handler in list(event_handlers.items()):
        try:
            handler.handle_event(data)
        except Exception:
            logger.error(f"Error in event handler {name}", exc_info=1)
    return data
