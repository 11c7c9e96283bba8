class QueryParamKeys:
    """Query parameters consumed by wizard pages."""

    MODE = "mode"
    EDITING = "editing"
    STEP = "step"
    ID = "id"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    LANG = "lang"
    APP_READY = "app.ready"
    APP_BOOTSTRAP_ERROR = "app.bootstrap_error"
    LABEL_STORE = "labels.store"
    WIZARD_PREFIX = "wiz"
