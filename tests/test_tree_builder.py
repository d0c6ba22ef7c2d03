"""
Tests for standard and well-formed tree assembly.
"""

import io
import logging
import unittest
from contextlib import redirect_stderr

from gb2260_tree.data import DATA_OF_202011
from gb2260_tree.hierarchy.tree_builder import (
    TreeBuilder,
    format_gb2260_standard,
    format_gb2260_well_formed
)
from gb2260_tree.models import ADCodeNode, ADDataItem


BEIJING = [
    ADDataItem(code='110000', name='北京市'),
    ADDataItem(code='110101', name='东城区'),
]


def find_node(nodes, code):
    for node in nodes or []:
        if node.code == code:
            return node
    return None


def iter_tree(nodes):
    for root in nodes:
        yield from root.iter_nodes()


class TestStandardFormat(unittest.TestCase):
    """Test cases for format_gb2260_standard."""

    def test_county_without_prefecture_hangs_off_province(self):
        tree = format_gb2260_standard(BEIJING)

        self.assertEqual(len(tree), 1)
        beijing = tree[0]
        self.assertEqual(beijing.code, '110000')
        self.assertEqual(beijing.level, 'province')
        self.assertEqual([c.code for c in beijing.children], ['110101'])
        self.assertIsNone(beijing.children[0].children)

    def test_embedded_dataset_beijing(self):
        tree = format_gb2260_standard(DATA_OF_202011)
        beijing = find_node(tree, '110000')

        self.assertEqual(
            {**beijing.to_dict(), 'children': []},
            {
                'code': '110000',
                'name': '北京市',
                'province_code': '11',
                'prefecture_code': '00',
                'county_code': '00',
                'level': 'province',
                'children': []
            }
        )
        self.assertEqual(
            find_node(beijing.children, '110101').to_dict(),
            {
                'code': '110101',
                'name': '东城区',
                'province_code': '11',
                'prefecture_code': '01',
                'county_code': '01',
                'level': 'county'
            }
        )
        self.assertEqual(len(beijing.children), 16)

    def test_counties_nest_under_matching_prefecture(self):
        tree = format_gb2260_standard(DATA_OF_202011)
        hebei = find_node(tree, '130000')

        self.assertEqual([c.code for c in hebei.children], ['130100'])
        shijiazhuang = hebei.children[0]
        self.assertEqual(shijiazhuang.level, 'prefecture')
        self.assertEqual(len(shijiazhuang.children), 22)
        self.assertEqual(shijiazhuang.children[0].code, '130102')
        self.assertEqual(shijiazhuang.children[-1].code, '130184')

    def test_provinces_keep_input_order_and_have_lists(self):
        tree = format_gb2260_standard(DATA_OF_202011)

        self.assertEqual(len(tree), 34)
        self.assertEqual(tree[0].code, '110000')
        self.assertEqual(tree[-1].code, '820000')
        self.assertEqual(find_node(tree, '140000').children, [])

    def test_orphan_county_is_sibling_not_parent(self):
        records = [
            ADDataItem(code='500000', name='重庆市'),
            ADDataItem(code='500101', name='万州区'),
            ADDataItem(code='500102', name='涪陵区'),
        ]
        tree = format_gb2260_standard(records)

        self.assertEqual([c.code for c in tree[0].children], ['500101', '500102'])
        self.assertIsNone(tree[0].children[0].children)

    def test_prefecture_declared_after_counties_still_owns_them(self):
        records = [
            ADDataItem(code='130000', name='河北省'),
            ADDataItem(code='130102', name='长安区'),
            ADDataItem(code='130100', name='石家庄市'),
        ]
        tree = format_gb2260_standard(records)

        self.assertEqual([c.code for c in tree[0].children], ['130100'])
        self.assertEqual([c.code for c in tree[0].children[0].children], ['130102'])

    def test_records_without_province_are_dropped(self):
        records = [
            ADDataItem(code='110000', name='北京市'),
            ADDataItem(code='130100', name='石家庄市'),
            ADDataItem(code='130102', name='长安区'),
            ADDataItem(code='1301', name='坏数据'),
        ]
        builder = TreeBuilder()
        tree = builder.build_standard(records)

        self.assertEqual(len(tree), 1)
        self.assertEqual(tree[0].children, [])
        self.assertEqual(builder.last_stats.dropped_prefectures, 1)
        self.assertEqual(builder.last_stats.dropped_counties, 2)
        self.assertEqual(builder.last_stats.get_attached_count(), 1)

    def test_counties_may_sit_at_depth_two(self):
        tree = format_gb2260_standard(DATA_OF_202011)
        depths = {node.code: depth for depth, node in iter_tree(tree)}

        self.assertEqual(depths['110101'], 2)
        self.assertEqual(depths['130102'], 3)

    def test_stats(self):
        builder = TreeBuilder()
        builder.build_standard(DATA_OF_202011)
        stats = builder.last_stats

        self.assertEqual(stats.total_records, 173)
        self.assertEqual(stats.province_level_counties, 116)
        self.assertEqual(stats.synthesized_prefectures, 0)
        self.assertEqual(stats.get_drop_rate(), 0.0)


class TestWellFormedFormat(unittest.TestCase):
    """Test cases for format_gb2260_well_formed."""

    def test_missing_prefecture_is_synthesized(self):
        tree = format_gb2260_well_formed(BEIJING)
        beijing = tree[0]

        self.assertEqual(len(beijing.children), 1)
        district = beijing.children[0]
        self.assertEqual(district.code, '110100')
        self.assertEqual(district.name, '市辖区')
        self.assertEqual(district.level, 'prefecture')
        self.assertEqual(district.county_code, '00')
        self.assertEqual([c.code for c in district.children], ['110101'])

    def test_embedded_dataset_beijing(self):
        tree = format_gb2260_well_formed(DATA_OF_202011)
        beijing = find_node(tree, '110000')
        district = find_node(beijing.children, '110100')

        self.assertEqual(
            {**district.to_dict(), 'children': []},
            {
                'code': '110100',
                'name': '市辖区',
                'province_code': '11',
                'prefecture_code': '01',
                'county_code': '00',
                'level': 'prefecture',
                'children': []
            }
        )
        self.assertEqual(find_node(district.children, '110101').name, '东城区')
        self.assertEqual(len(district.children), 16)

    def test_default_names_for_special_cases(self):
        tree = format_gb2260_well_formed(DATA_OF_202011)
        names = {node.code: node.name for _, node in iter_tree(tree)}

        self.assertEqual(names['419000'], '省直辖县级行政区划')
        self.assertEqual(names['429000'], '省直辖县级行政区划')
        self.assertEqual(names['469000'], '省直辖县级行政区划')
        self.assertEqual(names['500100'], '市辖区')
        self.assertEqual(names['500200'], '县')
        self.assertEqual(names['659000'], '自治区直辖县级行政区划')

    def test_chongqing_splits_into_districts_and_counties(self):
        tree = format_gb2260_well_formed(DATA_OF_202011)
        chongqing = find_node(tree, '500000')

        self.assertEqual([c.code for c in chongqing.children], ['500100', '500200'])
        self.assertEqual(len(chongqing.children[0].children), 26)
        self.assertEqual(len(chongqing.children[1].children), 12)

    def test_unknown_code_uses_fallback_name(self):
        records = [
            ADDataItem(code='440000', name='广东省'),
            ADDataItem(code='442001', name='测试县'),
        ]
        self.assertEqual(format_gb2260_well_formed(records)[0].children[0].name, '直辖')

        builder = TreeBuilder(fallback_prefecture_name='其他')
        self.assertEqual(builder.build_well_formed(records)[0].children[0].name, '其他')

    def test_uniform_three_level_shape(self):
        tree = format_gb2260_well_formed(DATA_OF_202011)

        for depth, node in iter_tree(tree):
            if depth == 1:
                self.assertEqual(node.level, 'province')
            elif depth == 2:
                self.assertEqual(node.level, 'prefecture', node.code)
            else:
                self.assertEqual(depth, 3)
                self.assertEqual(node.level, 'county', node.code)

        counties = [node for depth, node in iter_tree(tree) if node.level == 'county']
        self.assertEqual(len(counties), 138)

    def test_synthesized_prefecture_is_reused(self):
        builder = TreeBuilder()
        tree = builder.build_well_formed(DATA_OF_202011)

        self.assertEqual(builder.last_stats.synthesized_prefectures, 9)
        self.assertEqual(len(find_node(tree, '650000').children), 1)
        self.assertEqual(len(find_node(tree, '650000').children[0].children), 10)

    def test_records_without_province_are_dropped(self):
        records = [ADDataItem(code='110101', name='东城区')]

        self.assertEqual(format_gb2260_well_formed(records), [])


class TestAssemblyPurity(unittest.TestCase):
    """Repeated assembly must yield equal but independent trees."""

    def test_repeated_calls_are_deep_equal(self):
        for formatter in (format_gb2260_standard, format_gb2260_well_formed):
            first = formatter(DATA_OF_202011)
            second = formatter(DATA_OF_202011)

            self.assertEqual(first, second)
            self.assertEqual([n.to_dict() for n in first], [n.to_dict() for n in second])
            self.assertIsNot(first[0], second[0])
            self.assertIsNot(first[0].children, second[0].children)

    def test_children_are_owned_exclusively(self):
        tree = format_gb2260_well_formed(DATA_OF_202011)
        seen = set()

        for _, node in iter_tree(tree):
            self.assertNotIn(id(node), seen)
            seen.add(id(node))

    def test_province_codes_consistent_with_ancestors(self):
        for tree in (format_gb2260_standard(DATA_OF_202011),
                     format_gb2260_well_formed(DATA_OF_202011)):
            for province in tree:
                for _, node in province.iter_nodes():
                    self.assertEqual(node.province_code, province.province_code)

    def test_builder_logs_drops_at_debug(self):
        logger = logging.getLogger('gb2260_tree.tests.builder')
        builder = TreeBuilder(logger=logger)

        with self.assertLogs(logger, level='DEBUG') as captured:
            builder.build_standard([ADDataItem(code='130100', name='石家庄市')])

        self.assertTrue(any('Dropping prefecture 130100' in line for line in captured.output))

    def test_progress_bar_does_not_change_tree(self):
        with redirect_stderr(io.StringIO()):
            standard = TreeBuilder(show_progress=True).build_standard(DATA_OF_202011)
            well_formed = TreeBuilder(show_progress=True).build_well_formed(DATA_OF_202011)

        self.assertEqual(standard, format_gb2260_standard(DATA_OF_202011))
        self.assertEqual(well_formed, format_gb2260_well_formed(DATA_OF_202011))

    def test_empty_input(self):
        self.assertEqual(format_gb2260_standard([]), [])
        self.assertEqual(format_gb2260_well_formed([]), [])

    def test_node_type(self):
        tree = format_gb2260_standard(BEIJING)
        self.assertIsInstance(tree[0], ADCodeNode)


if __name__ == '__main__':
    unittest.main()
