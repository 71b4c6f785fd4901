"""Word lists used for tokenization and lexicon sentiment scoring."""

from typing import Dict, FrozenSet


STOP_WORDS: FrozenSet[str] = frozenset([
    'a', 'an', 'the', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'are', 'was', 'were', 'be', 'been',
    'being', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'shall', 'can', 'need', 'dare',
    'it', 'its', 'this', 'that', 'these', 'those', 'i', 'me', 'my', 'we',
    'our', 'you', 'your', 'he', 'him', 'his', 'she', 'her', 'they', 'them',
    'their', 'what', 'which', 'who', 'whom', 'when', 'where', 'why', 'how',
    'not', 'no', 'nor', 'if', 'then', 'else', 'so', 'as', 'than', 'too',
    'very', 'just', 'about', 'above', 'after', 'again', 'all', 'also',
    'am', 'any', 'because', 'before', 'below', 'between', 'both', 'each',
    'few', 'get', 'got', 'here', 'into', 'more', 'most', 'much', 'must',
    'now', 'only', 'other', 'out', 'own', 'said', 'same', 'some', 'still',
    'such', 'take', 'there', 'through', 'under', 'up', 'us', 'well',
    'over', 'down', 'while', 'during', 'until', 'against', 'further',
    'once', 'upon', 'already', 'always', 'never', 'often', 'however',
    'although', 'since', 'within', 'without', 'like', 'even',
    'back', 'make', 'made', 'way', 'think', 'know', 'see', 'look',
    'come', 'go', 'going', 'went', 'really', 'thing', 'things',
])


# AFINN-style polarity weights
SENTIMENT_LEXICON: Dict[str, int] = {
    # Positive
    'good': 3, 'great': 3, 'excellent': 4, 'amazing': 4, 'wonderful': 4,
    'fantastic': 4, 'outstanding': 5, 'superb': 5, 'brilliant': 4, 'awesome': 4,
    'love': 3, 'loved': 3, 'like': 2, 'enjoy': 2, 'happy': 3, 'pleased': 3,
    'satisfied': 2, 'delighted': 4, 'thrilled': 4, 'excited': 3, 'grateful': 3,
    'thankful': 2, 'beautiful': 3, 'best': 3, 'better': 2, 'improve': 2,
    'improved': 2, 'improvement': 2, 'success': 3, 'successful': 3, 'win': 3,
    'won': 3, 'strong': 2, 'strength': 2, 'positive': 2, 'benefit': 2,
    'beneficial': 2, 'effective': 2, 'efficient': 2, 'helpful': 2, 'hope': 2,
    'hopeful': 2, 'inspire': 3, 'inspired': 3, 'innovative': 3, 'progress': 2,
    'valuable': 2, 'support': 2, 'supported': 2, 'encourage': 2, 'encouraged': 2,
    'proud': 3, 'confident': 2, 'trust': 2, 'trusted': 2, 'impressive': 3,
    'remarkable': 3, 'perfect': 3, 'exceptional': 4, 'incredible': 4,
    'nice': 2, 'kind': 2, 'generous': 3, 'warm': 2, 'friendly': 2,
    'safe': 1, 'secure': 2, 'comfortable': 2, 'fun': 3, 'interesting': 2,
    'fascinating': 3, 'engaging': 2, 'rewarding': 2, 'worthy': 2,
    'agree': 1, 'advantage': 2, 'achieve': 2, 'achievement': 3,
    'capable': 2, 'commitment': 2, 'committed': 2, 'opportunity': 2,
    # Negative
    'bad': -3, 'terrible': -4, 'horrible': -4, 'awful': -4, 'worst': -4,
    'poor': -2, 'worse': -3, 'negative': -2, 'fail': -3, 'failed': -3,
    'failure': -3, 'problem': -2, 'issue': -1, 'concern': -1, 'concerned': -2,
    'worried': -2, 'worry': -2, 'fear': -2, 'afraid': -2, 'angry': -3,
    'frustrate': -3, 'frustrated': -3, 'frustrating': -3, 'annoyed': -2,
    'annoying': -2, 'disappoint': -3, 'disappointed': -3, 'disappointing': -3,
    'sad': -2, 'unhappy': -2, 'unfortunate': -2, 'unfortunately': -2,
    'hate': -4, 'hated': -4, 'dislike': -2, 'difficult': -1, 'hard': -1,
    'struggle': -2, 'struggling': -2, 'suffer': -3, 'suffering': -3,
    'pain': -2, 'painful': -2, 'stress': -2, 'stressed': -2, 'stressful': -2,
    'weak': -2, 'weakness': -2, 'lack': -2, 'lacking': -2, 'loss': -3,
    'lost': -2, 'miss': -1, 'missing': -2, 'damage': -3, 'damaged': -3,
    'harm': -3, 'harmful': -3, 'danger': -3, 'dangerous': -3,
    'risk': -1, 'risky': -2, 'threat': -3, 'crisis': -3,
    'conflict': -2, 'disagree': -2, 'wrong': -2, 'mistake': -2,
    'error': -2, 'fault': -2, 'blame': -2, 'complain': -2, 'complaint': -2,
    'reject': -3, 'rejected': -3, 'deny': -2, 'denied': -2,
    'confuse': -2, 'confused': -2, 'confusing': -2, 'unclear': -1,
    'impossible': -3, 'useless': -3, 'worthless': -4, 'boring': -2,
    'tired': -2, 'exhausted': -3, 'overwhelm': -3, 'overwhelmed': -3,
    'abuse': -4, 'corrupt': -4, 'corruption': -4, 'unfair': -3,
    'unjust': -3, 'inequality': -2, 'barrier': -2, 'obstacle': -2,
    'neglect': -3, 'neglected': -3, 'ignore': -2, 'ignored': -2,
}


NEGATION_WORDS: FrozenSet[str] = frozenset([
    'not', 'no', 'never', 'neither', 'nor',
    "don't", "doesn't", "didn't", "won't", "wouldn't",
    "couldn't", "shouldn't", "isn't", "aren't",
    "wasn't", "weren't", "can't", "hasn't", "haven't",
])
