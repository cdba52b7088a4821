import pytest

from fmtlog.modules import ModuleFilter, is_ancestor

#
# is_ancestor tests
#


class TestIsAncestor:

    def test_equal(self):
        """Test a path is its own ancestor."""
        assert is_ancestor('app', 'app')

    def test_double_colon_child(self):
        """Test :: separated children are descendants."""
        assert is_ancestor('app', 'app::db::pool')

    def test_dotted_child(self):
        """Test dot separated children are descendants."""
        assert is_ancestor('app', 'app.db')

    def test_no_false_prefix(self):
        """Test a bare string prefix is not an ancestor."""
        assert not is_ancestor('net', 'network')
        assert not is_ancestor('net', 'net_utils')

    def test_child_is_not_ancestor(self):
        """Test the relation is not symmetric."""
        assert not is_ancestor('app::db', 'app')


#
# ModuleFilter tests
#


class TestModuleFilterInsert:

    def test_ancestor_then_descendant(self):
        """Test inserting a descendant of an existing entry is a no-op."""
        mf = ModuleFilter()
        mf.insert('app')
        mf.insert('app::db')
        assert mf.prefixes == {'app'}

    def test_descendant_then_ancestor(self):
        """Test inserting an ancestor removes its descendants."""
        mf = ModuleFilter()
        mf.insert('app::db')
        mf.insert('app')
        assert mf.prefixes == {'app'}

    def test_duplicate(self):
        """Test inserting an equal entry is a no-op."""
        mf = ModuleFilter(['app', 'app'])
        assert len(mf) == 1

    def test_siblings_kept(self):
        """Test unrelated entries are all kept."""
        mf = ModuleFilter(['app::db', 'app::net', 'lib'])
        assert mf.prefixes == {'app::db', 'app::net', 'lib'}

    def test_ancestor_removes_many(self):
        """Test one ancestor replaces several descendants."""
        mf = ModuleFilter(['app::db', 'app::net', 'lib'])
        mf.insert('app')
        assert mf.prefixes == {'app', 'lib'}


class TestModuleFilterContains:

    @pytest.mark.parametrize('order', [['app', 'app::db'], ['app::db', 'app']])
    def test_nested_membership(self, order):
        """Test membership after inserting in either order."""
        mf = ModuleFilter(order)
        assert mf.contains('app::db::pool')
        assert not mf.contains('other')

    def test_empty_allows_everything(self):
        """Test an empty filter fails open."""
        mf = ModuleFilter()
        for module in ('', 'anything', 'a::b::c', None):
            assert mf.contains(module)

    def test_none_module_with_filter(self):
        """Test an event without a module is rejected by a non-empty filter."""
        assert not ModuleFilter(['app']).contains(None)

    def test_in_operator(self):
        """Test `in` uses contains."""
        mf = ModuleFilter(['app'])
        assert 'app.views' in mf
        assert 'apple' not in mf

    def test_repr(self):
        """Test repr shows the entries."""
        assert repr(ModuleFilter(['app'])) == "ModuleFilter(['app'])"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
