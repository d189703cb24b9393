"""
Right-click menu of the viewport.

Built fresh on every right click from the open image's layers and the
catalog's colorspace families. Each entry calls ``on_select`` with a new
ViewSelection; the menu itself holds no state.
"""

from PyQt5.QtWidgets import QAction, QActionGroup, QMenu


def _add_choice(menu: QMenu, group: QActionGroup, label: str, checked: bool, callback):
    act = QAction(label, menu)
    act.setCheckable(True)
    act.setChecked(checked)
    act.triggered.connect(lambda _checked=False: callback())
    group.addAction(act)
    menu.addAction(act)
    return act


def _add_colorspace_menu(parent: QMenu, title: str, catalog, current: str, make_selection, on_select):
    menu = parent.addMenu(title)
    families = catalog.list_by_family() if catalog is not None else {}
    if not families:
        menu.setEnabled(False)
        return menu
    group = QActionGroup(menu)
    for family, names in families.items():
        sub = menu.addMenu(family)
        for name in names:
            _add_choice(sub, group, name, name == current,
                        lambda n=name: on_select(make_selection(n)))
    return menu


def build_context_menu(parent, image, catalog, selection, on_select) -> QMenu:
    """
    Assemble the View Layer / Input Colorspace / Output Colorspace menu.

    Parameters
    ----------
    parent : QWidget
        Owner of the menu.
    image : ImageObject | None
        Source of the layer list; the View Layer menu is disabled without one.
    catalog : ColorspaceCatalog | None
        Source of the colorspace families.
    selection : ViewSelection
        Current choice, shown checked.
    on_select : callable(ViewSelection)
        Called with the replacement selection when an entry is chosen.
    """
    menu = QMenu(parent)

    # ---- View layers: layer -> component
    view_menu = menu.addMenu("View Layer")
    if image is None:
        view_menu.setEnabled(False)
    else:
        group = QActionGroup(view_menu)
        for layer in image.layers():
            sub = view_menu.addMenu(layer)
            for comp in image.components(layer):
                checked = (layer == selection.channel_family and comp == selection.component)
                _add_choice(sub, group, comp, checked,
                            lambda l=layer, c=comp: on_select(
                                selection.replace(channel_family=l, component=c)))

    menu.addSeparator()

    _add_colorspace_menu(menu, "Input Colorspace", catalog, selection.input_colorspace,
                         lambda n: selection.replace(input_colorspace=n), on_select)
    _add_colorspace_menu(menu, "Output Colorspace", catalog, selection.output_colorspace,
                         lambda n: selection.replace(output_colorspace=n), on_select)
    return menu
