"""
Controlador de rondas: un canal está IDLE (sin pregunta) o ACTIVE (una pregunta).

start_round   IDLE|ACTIVE -> ACTIVE  (si había pregunta, se revela su respuesta)
submit_answer ACTIVE -> IDLE         (siempre, acierte o no)
"""
import logging
import random

from .config import Settings
from .judge import judge
from .provider import fetch_question
from .scorer import strip_html
from .slack import SlackDirectory
from .store import RoundStore, ScoreLedger, format_score

log = logging.getLogger(__name__)

# Frases para cuando alguien responde sin ronda activa. Puramente cosméticas.
TAUNTS = (
    "Welcome back to Slack Jeopardy. Before we begin this Jeopardy round, I'd like to ask our contestants once again to please refrain from using ethnic slurs.",
    "Okay, Turd Ferguson.",
    "I hate my job.",
    "That is incorrect.",
    "Let's just get this over with.",
    "Do you have an answer?",
    "I don't believe this. Where did you get that magic marker? We frisked you in on the way in here.",
    "What a ride it has been, but boy, oh boy, these Slack users did not know the right answers to any of the questions.",
    "Back off. I don't have to take that from you.",
    "That is _awful_.",
    "Okay, for the sake of tradition, let's take a look at the answers.",
    "Beautiful. Just beautiful.",
    "Good for you. Well, as always, three perfectly good charities have been deprived of money, here on Slack Jeopardy. I'm {bot}, and all of you should be ashamed of yourselves! Good night!",
    "And welcome back to Slack Jeopardy. Because of what just happened before during the commercial, I'd like to apologize to all blind people and children.",
    "Thank you, thank you. Moving on.",
    "I really thought that was going to work.",
    "Wonderful. Let's take a look at the categories. They are: `Potent Potables`, `Point to your own head`, `Letters or Numbers`, `Will this hurt if you put it in your mouth`, `An album cover`, `Make any noise`, and finally, `Famous Muppet Frogs`. I should add that the answer to every question in that category is `Kermit`.",
    "For the last time, that is not a category.",
    "Unbelievable.",
    "Great. Let's take a look at the final board. And the categories are: `Potent Potables`, `Sharp Things`, `Movies That Start with the Word Jaws`, `A Petit Déjeuner` - that category is about French phrases, so let's just skip it.",
    "Enough. Let's just get this over with. Here are the categories, they are: `Potent Potables`, `Countries Between Mexico and Canada`, `Members of Simon and Garfunkel`, `I Have a Chardonnay` - you choose this category, you automatically get the points and I get to have a glass of wine - `Things You Do With a Pencil Sharpener`, `Tie Your Shoe`, and finally, `Toast`.",
    "Better luck to all of you, in the next round. It's time for Slack Jeopardy, let's take a look at the board. And the categories are: `Potent Potables`, `Literature` - which is just a big word for books - `Therapists`, `Current U.S. Presidents`, `Show and Tell`, `Household Objects`, and finally, `One-Letter Words`.",
    "Uh, I see. Get back to your podium.",
    "You look pretty sure of yourself. Think you've got the right answer?",
    "Welcome back to Slack Jeopardy. We've got a real barnburner on our hands here.",
    "And welcome back to Slack Jeopardy. I'd like to once again remind our contestants that there are proper bathroom facilities located _in_ the studio.",
    "Welcome back to Slack Jeopardy. Once again, I'm going to recommend that our viewers watch something else.",
    "Great. Better luck to all of you in the next round. It's time for Slack Jeopardy. Let's take a look at the board. And the categories are: `Potent Potables`, `The Vowels`, `Presidents Who Are On the One Dollar Bill`, `Famous Titles`, `Ponies`, `The Number 10`, and finally: `Foods That End In \"Amburger\"`.",
    "Let's take a look at the board. The categories are: `Potent Potables`, `The Pen is Mightier` - that category is all about quotes from famous authors, so you'll all probably be more comfortable with our next category - `Shiny Objects`, continuing with `Opposites`, `Things you Shouldn't Put in Your Mouth`, `What Time is It?`; and, finally, `Months That Start With Feb`.",
)

DEFAULT_BOT_NAME = "trebekbot"


class RoundController:
    def __init__(self, rounds: RoundStore, scores: ScoreLedger, provider,
                 directory: SlackDirectory, settings: Settings, rng: random.Random | None = None):
        self.rounds = rounds
        self.scores = scores
        self.provider = provider
        self.directory = directory
        self.settings = settings
        self.rng = rng or random.Random()

    @property
    def bot_name(self) -> str:
        return self.settings.bot_username or DEFAULT_BOT_NAME

    def _name(self, user_id: str, display_name: str) -> str:
        return self.directory.resolve_display_name(user_id, display_name)

    # ---------- Rondas ----------
    def start_round(self, channel_id: str) -> str:
        question = fetch_question(self.provider, self.settings.question_max_attempts)
        text = ""
        previous = self.rounds.get_active(channel_id)
        if previous is not None:
            text = f"The answer is `{strip_html(previous.answer)}`. Moving on… "
        text += f"The category is `{question.category}` for ${question.value}: `{question.prompt}`"
        log.info(
            f"ID: {question.id} | Category: {question.category} | Question: {question.prompt} "
            f"| Answer: {question.answer} | Value: {question.value}"
        )
        self.rounds.set_active(channel_id, question)
        return text

    def submit_answer(self, channel_id: str, user_id: str, display_name: str, submission: str) -> str:
        question = self.rounds.get_active(channel_id)
        if question is None:
            return self.taunt()

        verdict = judge(question.answer, submission)
        name = self._name(user_id, display_name)
        if verdict.is_question_format and verdict.is_correct:
            score = self.scores.apply_delta(user_id, question.value)
            reply = f"That is the correct answer, {name}. Your total score is {format_score(score)}."
        elif verdict.is_correct:
            score = self.scores.apply_delta(user_id, -question.value)
            reply = (f"That is correct, {name}, but responses have to be in the form of a question. "
                     f"Your total score is {format_score(score)}.")
        else:
            score = self.scores.apply_delta(user_id, -question.value)
            reply = (f"Sorry, {name}, the correct answer is `{strip_html(question.answer)}`. "
                     f"Your score is now {format_score(score)}.")
        self.rounds.clear_active(channel_id)
        return reply

    # ---------- Otros ----------
    def get_score_reply(self, user_id: str, display_name: str) -> str:
        score = self.scores.get_score(user_id)
        return f"{self._name(user_id, display_name)}, your score is {format_score(score)}."

    def taunt(self) -> str:
        return self.rng.choice(TAUNTS).format(bot=self.bot_name)

    def help_text(self) -> str:
        bot = self.bot_name
        return (
            f"Type `{bot} jeopardy me` to start a new round of Slack Jeopardy. I will pick the category and price. "
            "Anyone in the channel can respond.\n"
            f"Type `{bot} [what|where|who] [is|are] [answer]?` to respond to the active round. "
            f"Remember, responses must be in the form of a question, e.g. `{bot} what is dirt?`.\n"
            f"Type `{bot} what is my score` to see your current score.\n"
        )
