"""Keyword categorizer: ingredient or food name -> grocery store section.

Rules are checked in a fixed order (produce, meat, dairy, pantry) and the
first match wins. Each section has an English and a Chinese keyword list;
English patterns run on the lower-cased name, Chinese ones on the name as
given. Names matching nothing land in ``other``.
"""
import re
from typing import List, Pattern, Tuple

from mealplan.domain.ShoppingList import Category

_PRODUCE_EN = re.compile(
    r'vegetable(?!\s+(?:oil|broth|stock|bouillon))|fruit|lettuce|tomato(?!\s+(?:paste|sauce|puree))|onion(?!\s+powder)|'
    r'garlic(?!\s+powder)|(?<!black )(?<!white )(?<!cayenne )pepper(?!corn|oni|\s+flakes)|carrot|broccoli|'
    r'spinach|kale|cabbage|potato|avocado|apple(?!\s+cider)|banana|berry|berries|lemon|lime|'
    r'orange|herb|cilantro|parsley|basil|cucumber|zucchini|mushroom|celery|arugula|ginger|'
    r'eggplant|squash|pumpkin|scallion|shallot|leek|asparagus|cauliflower|(?<!pepper)corn(?!starch|meal|\s+(?:oil|syrup))|'
    r'\bpeas?\b|green bean|sprout|radish|beet|grape(?!seed)|mango|pear(?!l)|peach|melon|pineapple|'
    r'cherry|cherries|chive|mint|dill|thyme|rosemary|bok choy|jalape'
)
_PRODUCE_ZH = re.compile(
    r'蔬菜|水果|生菜|番茄(?!酱)|西红柿(?!酱)|洋葱|蒜|大蒜|辣椒|胡萝卜|西兰花|菠菜|白菜|土豆|马铃薯|牛油果|'
    r'苹果|香蕉|柠檬|橙|橘|姜|葱|香菜|香葱|香菇|蘑菇|木耳|金针菇|豆芽|芹菜|茄子|黄瓜|青瓜|南瓜|'
    r'冬瓜|丝瓜|苦瓜|韭菜|豆角|豌豆|玉米|青椒|红椒|彩椒|芦笋|西芹|花菜|莴笋|萝卜|山药|莲藕|竹笋|荸荠'
)
_MEAT_EN = re.compile(
    r'(?:chicken|beef|pork|turkey|lamb|veal|duck)(?!\s+(?:stock|broth|bouillon|cube))|'
    r'fish(?!\s+sauce)|salmon|tuna|\bcod\b|tilapia|meat|bacon|sausage|\bham\b|steak|'
    r'shrimp|prawn|crab|lobster|scallop|mussel|clam|oyster(?!\s+sauce)|anchov|chorizo|prosciutto'
)
_MEAT_ZH = re.compile(
    r'鸡(?!蛋|精|粉)|鸡肉|鸡胸|鸡腿|鸡翅|牛肉|猪肉|鱼(?!露)|鱼肉|三文鱼|鲑鱼|火鸡|羊肉|肉|培根|香肠|腊肠|'
    r'虾|蟹|螃蟹|龙虾|鸭|鸭肉|排骨|五花肉|里脊|牛排|肉丸|肉馅|肉片|肉丁'
)
_DAIRY_EN = re.compile(
    r'(?<!coconut )milk|cheese|yogurt|yoghurt|(?<!peanut )(?<!nut )butter(?!nut)|cream|'
    r'egg(?!\s+noodle)|dairy|mozzarella|parmesan|cheddar|feta|ricotta|ghee|kefir'
)
_DAIRY_ZH = re.compile(r'牛奶|奶|芝士|奶酪|酸奶|黄油|奶油|蛋|鸡蛋|蛋黄|蛋清|蛋白')
_PANTRY_EN = re.compile(
    r'rice|pasta|spaghetti|noodle|flour|sugar|salt|oil|vinegar|sauce|paste|stock|broth|'
    r'bouillon|spice|powder|flakes|cumin|paprika|cinnamon|oregano|nutmeg|bean|lentil|chickpea|'
    r'quinoa|oat|bread|tortilla|cereal|honey|syrup|jam|ketchup|mustard|mayo|peanut|nut|almond|'
    r'seed|baking|yeast|cocoa|chocolate|coffee|\btea\b|wine|cornstarch|soy|tofu|cracker|'
    r'peppercorn|black pepper|white pepper|cayenne|couscous|breadcrumb|sesame'
)
_PANTRY_ZH = re.compile(r'米|面|油|酱|醋|盐|糖|粉|豆腐|料酒|淀粉|香料|调料|罐头|面包|鸡精|鱼露|芝麻|花生')

_RULES: List[Tuple[Category, Pattern, Pattern]] = [
    (Category.PRODUCE, _PRODUCE_EN, _PRODUCE_ZH),
    (Category.MEAT, _MEAT_EN, _MEAT_ZH),
    (Category.DAIRY, _DAIRY_EN, _DAIRY_ZH),
    (Category.PANTRY, _PANTRY_EN, _PANTRY_ZH),
]


def categorize(name: str) -> Category:
    """Return the shopping category for a raw or normalized name. Pure and deterministic."""
    text = (name or '').strip()
    lower = text.lower()
    for category, english, chinese in _RULES:
        if english.search(lower) or chinese.search(text):
            return category
    return Category.OTHER


__all__ = ['categorize']
