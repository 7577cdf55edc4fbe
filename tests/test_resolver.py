import pytest

from autowait import (
    BaseElement,
    ButtonElement,
    ConfigurationError,
    DeadlineExceeded,
    DropdownElement,
    ElementRegistry,
    ElementResolver,
    Locator,
    StaleReference,
    TableHeaderElement,
    default_registry,
)

from fakes import FakeNode


@pytest.fixture
def rows(driver):
    nodes = [FakeNode('li', text=f"row {i}", class_='row') for i in range(3)]
    driver.document.add(FakeNode('ul', id='list').add(*nodes))
    return nodes


class TestResolveOne:

    def test_is_lazy(self, resolver, driver) -> None:
        button = resolver.resolve_one('button', '#not-yet')

        assert isinstance(button, ButtonElement)
        assert driver.finds == 0

    def test_binds_locator_and_parent(self, resolver) -> None:
        handle = resolver.resolve_one('dropdown', Locator.name('size'), parent='#form')

        assert isinstance(handle, DropdownElement)
        assert handle.locator == Locator.name('size', parent=Locator.css('#form'))

    def test_accepts_registered_class_as_kind(self, resolver) -> None:
        assert type(resolver.resolve_one(ButtonElement, '#x')) is ButtonElement

    def test_timeout_is_per_handle(self, resolver, session) -> None:
        handle = resolver.resolve_one('div', '#x', timeout=0.4)

        with pytest.raises(DeadlineExceeded) as excinfo:
            handle.get_text()
        assert excinfo.value.timeout == 0.4

    def test_unknown_kind_is_configuration_error(self, resolver, driver) -> None:
        with pytest.raises(ConfigurationError):
            resolver.resolve_one('spaceship', '#x')
        assert driver.finds == 0


class TestResolveMany:

    def test_one_handle_per_match(self, resolver, rows) -> None:
        handles = resolver.resolve_many('div', '.row')

        assert len(handles) == 3
        assert [handle.get_text() for handle in handles] == ['row 0', 'row 1', 'row 2']
        assert [handle.index for handle in handles] == [0, 1, 2]

    def test_no_match_is_empty_list(self, resolver, clock) -> None:
        assert resolver.resolve_many('div', '.nothing') == []
        assert clock.now == 0.0

    def test_snapshot_survives_dom_mutation(self, resolver, rows) -> None:
        handles = resolver.resolve_many('div', '.row')
        rows[1].remove()

        assert len(handles) == 3
        assert handles[0].get_text() == 'row 0'
        assert handles[2].get_text() == 'row 2'
        with pytest.raises(StaleReference):
            handles[1].locate()
        assert len(resolver.resolve_many('div', '.row')) == 2

    def test_parent_scope(self, resolver, driver, rows) -> None:
        driver.document.add(FakeNode('li', text='stray', class_='row'))

        assert len(resolver.resolve_many('div', '.row')) == 4
        assert len(resolver.resolve_many('div', '.row', parent='#list')) == 3

    def test_waits_for_parent(self, resolver, driver, clock) -> None:
        late = FakeNode('ul', id='late').add(FakeNode('li', class_='row'))
        clock.at(0.4, lambda: driver.document.add(late))

        handles = resolver.resolve_many('div', '.row', parent='#late')

        assert len(handles) == 1
        assert clock.now >= 0.4

    def test_missing_parent_times_out(self, resolver) -> None:
        with pytest.raises(DeadlineExceeded):
            resolver.resolve_many('div', '.row', parent='#nowhere')

    def test_table_headers_carry_column_index(self, resolver, driver) -> None:
        header_row = FakeNode('tr').add(*(FakeNode('th', text=name) for name in ('Name', 'Age', 'City')))
        driver.document.add(FakeNode('table', id='people').add(header_row))

        headers = resolver.resolve_many('table_header', 'th', parent='#people')

        assert all(isinstance(header, TableHeaderElement) for header in headers)
        assert [(h.get_text(), h.get_column_index()) for h in headers] == [('Name', 1), ('Age', 2), ('City', 3)]

    def test_unknown_kind_fails_before_querying(self, resolver, driver) -> None:
        with pytest.raises(ConfigurationError):
            resolver.resolve_many('spaceship', '.row')
        assert driver.finds == 0


class TestRegistry:

    def test_builtin_kinds_registered(self) -> None:
        for kind in ('element', 'div', 'label', 'image', 'clickable', 'button', 'link', 'checkbox',
                     'radio', 'input', 'textarea', 'dropdown', 'table_header'):
            assert kind in default_registry

    def test_new_kind_without_touching_the_resolver(self, session, driver) -> None:
        registry = ElementRegistry()

        @registry.element('badge')
        class BadgeElement(BaseElement):
            def count(self) -> int:
                return int(self.get_text())

        driver.document.add(FakeNode('span', text='7', id='badge'))
        badge = ElementResolver(session, registry).resolve_one('badge', '#badge')

        assert isinstance(badge, BadgeElement)
        assert badge.count() == 7
        assert badge.registry is registry

    def test_plain_factory_function(self, session) -> None:
        registry = ElementRegistry()
        built = []

        def factory(**kwargs):
            built.append(kwargs)
            return kwargs['locator']

        registry.register('raw-locator', factory)
        result = ElementResolver(session, registry).resolve_one('raw-locator', '#x')

        assert result == Locator.css('#x')
        assert built[0]['session'] is session

    def test_duplicate_registration_rejected(self) -> None:
        registry = ElementRegistry()
        registry.register('thing', BaseElement)

        registry.register('thing', BaseElement)
        with pytest.raises(ConfigurationError):
            registry.register('thing', ButtonElement)

        registry.register('thing', ButtonElement, replace=True)
        assert registry.kind_of(ButtonElement) == 'thing'

    def test_unregistered_class_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ElementRegistry().kind_of(BaseElement)

    @pytest.mark.parametrize('kind', ['', '   ', None])
    def test_blank_kind_rejected(self, kind) -> None:
        with pytest.raises(ConfigurationError):
            ElementRegistry().register(kind, BaseElement)
