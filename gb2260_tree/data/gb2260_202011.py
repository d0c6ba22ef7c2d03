"""
Excerpt of the November 2020 administrative division catalog.

Holds every province-level division, the complete county lists of the
divisions whose prefecture level is absent from the catalog (the four
municipalities, the directly administered county-level units of Henan,
Hubei, Hainan and Xinjiang), and 石家庄市 with its counties as an ordinary
prefecture. Records appear in catalog order.
"""

from ..models import ADDataItem


DATA_VERSION = '202011'

_RECORDS = (
    ('110000', '北京市'),
    ('110101', '东城区'),
    ('110102', '西城区'),
    ('110105', '朝阳区'),
    ('110106', '丰台区'),
    ('110107', '石景山区'),
    ('110108', '海淀区'),
    ('110109', '门头沟区'),
    ('110111', '房山区'),
    ('110112', '通州区'),
    ('110113', '顺义区'),
    ('110114', '昌平区'),
    ('110115', '大兴区'),
    ('110116', '怀柔区'),
    ('110117', '平谷区'),
    ('110118', '密云区'),
    ('110119', '延庆区'),
    ('120000', '天津市'),
    ('120101', '和平区'),
    ('120102', '河东区'),
    ('120103', '河西区'),
    ('120104', '南开区'),
    ('120105', '河北区'),
    ('120106', '红桥区'),
    ('120110', '东丽区'),
    ('120111', '西青区'),
    ('120112', '津南区'),
    ('120113', '北辰区'),
    ('120114', '武清区'),
    ('120115', '宝坻区'),
    ('120116', '滨海新区'),
    ('120117', '宁河区'),
    ('120118', '静海区'),
    ('120119', '蓟州区'),
    ('130000', '河北省'),
    ('130100', '石家庄市'),
    ('130102', '长安区'),
    ('130104', '桥西区'),
    ('130105', '新华区'),
    ('130107', '井陉矿区'),
    ('130108', '裕华区'),
    ('130109', '藁城区'),
    ('130110', '鹿泉区'),
    ('130111', '栾城区'),
    ('130121', '井陉县'),
    ('130123', '正定县'),
    ('130125', '行唐县'),
    ('130126', '灵寿县'),
    ('130127', '高邑县'),
    ('130128', '深泽县'),
    ('130129', '赞皇县'),
    ('130130', '无极县'),
    ('130131', '平山县'),
    ('130132', '元氏县'),
    ('130133', '赵县'),
    ('130181', '辛集市'),
    ('130183', '晋州市'),
    ('130184', '新乐市'),
    ('140000', '山西省'),
    ('150000', '内蒙古自治区'),
    ('210000', '辽宁省'),
    ('220000', '吉林省'),
    ('230000', '黑龙江省'),
    ('310000', '上海市'),
    ('310101', '黄浦区'),
    ('310104', '徐汇区'),
    ('310105', '长宁区'),
    ('310106', '静安区'),
    ('310107', '普陀区'),
    ('310109', '虹口区'),
    ('310110', '杨浦区'),
    ('310112', '闵行区'),
    ('310113', '宝山区'),
    ('310114', '嘉定区'),
    ('310115', '浦东新区'),
    ('310116', '金山区'),
    ('310117', '松江区'),
    ('310118', '青浦区'),
    ('310120', '奉贤区'),
    ('310151', '崇明区'),
    ('320000', '江苏省'),
    ('330000', '浙江省'),
    ('340000', '安徽省'),
    ('350000', '福建省'),
    ('360000', '江西省'),
    ('370000', '山东省'),
    ('410000', '河南省'),
    ('419001', '济源市'),
    ('420000', '湖北省'),
    ('429004', '仙桃市'),
    ('429005', '潜江市'),
    ('429006', '天门市'),
    ('429021', '神农架林区'),
    ('430000', '湖南省'),
    ('440000', '广东省'),
    ('450000', '广西壮族自治区'),
    ('460000', '海南省'),
    ('469001', '五指山市'),
    ('469002', '琼海市'),
    ('469005', '文昌市'),
    ('469006', '万宁市'),
    ('469007', '东方市'),
    ('469021', '定安县'),
    ('469022', '屯昌县'),
    ('469023', '澄迈县'),
    ('469024', '临高县'),
    ('469025', '白沙黎族自治县'),
    ('469026', '昌江黎族自治县'),
    ('469027', '乐东黎族自治县'),
    ('469028', '陵水黎族自治县'),
    ('469029', '保亭黎族苗族自治县'),
    ('469030', '琼中黎族苗族自治县'),
    ('500000', '重庆市'),
    ('500101', '万州区'),
    ('500102', '涪陵区'),
    ('500103', '渝中区'),
    ('500104', '大渡口区'),
    ('500105', '江北区'),
    ('500106', '沙坪坝区'),
    ('500107', '九龙坡区'),
    ('500108', '南岸区'),
    ('500109', '北碚区'),
    ('500110', '綦江区'),
    ('500111', '大足区'),
    ('500112', '渝北区'),
    ('500113', '巴南区'),
    ('500114', '黔江区'),
    ('500115', '长寿区'),
    ('500116', '江津区'),
    ('500117', '合川区'),
    ('500118', '永川区'),
    ('500119', '南川区'),
    ('500120', '璧山区'),
    ('500151', '铜梁区'),
    ('500152', '潼南区'),
    ('500153', '荣昌区'),
    ('500154', '开州区'),
    ('500155', '梁平区'),
    ('500156', '武隆区'),
    ('500229', '城口县'),
    ('500230', '丰都县'),
    ('500231', '垫江县'),
    ('500233', '忠县'),
    ('500235', '云阳县'),
    ('500236', '奉节县'),
    ('500237', '巫山县'),
    ('500238', '巫溪县'),
    ('500240', '石柱土家族自治县'),
    ('500241', '秀山土家族苗族自治县'),
    ('500242', '酉阳土家族苗族自治县'),
    ('500243', '彭水苗族土家族自治县'),
    ('510000', '四川省'),
    ('520000', '贵州省'),
    ('530000', '云南省'),
    ('540000', '西藏自治区'),
    ('610000', '陕西省'),
    ('620000', '甘肃省'),
    ('630000', '青海省'),
    ('640000', '宁夏回族自治区'),
    ('650000', '新疆维吾尔自治区'),
    ('659001', '石河子市'),
    ('659002', '阿拉尔市'),
    ('659003', '图木舒克市'),
    ('659004', '五家渠市'),
    ('659005', '北屯市'),
    ('659006', '铁门关市'),
    ('659007', '双河市'),
    ('659008', '可克达拉市'),
    ('659009', '昆玉市'),
    ('659010', '胡杨河市'),
    ('710000', '台湾省'),
    ('810000', '香港特别行政区'),
    ('820000', '澳门特别行政区'),
)

DATA_OF_202011 = tuple(ADDataItem(code=code, name=name) for code, name in _RECORDS)
