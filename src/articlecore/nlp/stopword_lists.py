"""
Bundled stop word lists, keyed by ISO 639-1 code.
"""

from __future__ import annotations

from typing import Dict, FrozenSet


def _words(text: str) -> FrozenSet[str]:
    return frozenset(text.split())


STOPWORDS: Dict[str, FrozenSet[str]] = {
    "en": _words(
        """
        a about above across after afterwards again against all almost alone along already also although
        always am among amongst amount an and another any anyhow anyone anything anyway anywhere are around
        as at back be became because become becomes becoming been before beforehand behind being below
        beside besides between beyond both bottom but by call can cannot could did do does doing done down
        due during each eg eight either eleven else elsewhere empty enough etc even ever every everyone
        everything everywhere except few fifteen fifty first five for former formerly forty four from front
        full further get give go had has have having he hence her here hereafter hereby herein hereupon hers
        herself him himself his how however hundred i ie if in indeed into is it its itself just keep last
        latter latterly least less made many may me meanwhile might mine more moreover most mostly move much
        must my myself name namely neither never nevertheless next nine no nobody none noone nor not nothing
        now nowhere of off often on once one only onto or other others otherwise our ours ourselves out over
        own part per perhaps please put rather re said same say says see seem seemed seeming seems several
        she should show side since six sixty so some somehow someone something sometime sometimes somewhere
        still such take ten than that the their theirs them themselves then thence there thereafter thereby
        therefore therein thereupon these they third this those though three through throughout thru thus to
        together too top toward towards twelve twenty two under until up upon us very via was we well were
        what whatever when whence whenever where whereafter whereas whereby wherein whereupon wherever whether
        which while whither who whoever whole whom whose why will with within without would yet you your
        yours yourself yourselves
        """
    ),
    "es": _words(
        """
        a al algo algunas algunos ante antes como con contra cual cuando de del desde donde durante e el
        ella ellas ellos en entre era erais eran eras eres es esa esas ese eso esos esta estaba estado estar
        estas este esto estos fue fueron fui ha había han has hasta hay la las le les lo los más me mi mis
        mucho muy nada ni no nos nosotros o os otra otro para pero poco por porque que quien se sea ser si
        sido sin sobre son su sus también te tiene tienen todo todos tu tus un una uno unos y ya yo
        """
    ),
    "fr": _words(
        """
        à au aux avec ce ces dans de des du elle en et eux il ils je la le les leur lui ma mais me même mes
        moi mon ne nos notre nous on ou où par pas pour qu que qui sa se ses son sur ta te tes toi ton tu un
        une vos votre vous c d j l m n s t y été étée étées étés étant suis es est sommes êtes sont serai
        sera serons seront était étaient fut ai as avons avez ont aura avait avaient eu plus comme cette
        tout tous aussi bien fait faire peut
        """
    ),
    "de": _words(
        """
        aber alle allem allen aller alles als also am an ander andere anderem anderen anderer anderes auch
        auf aus bei bin bis bist da damit dann das dass dein deine dem den denn der des dich die dies diese
        diesem diesen dieser dieses dir doch dort du durch ein eine einem einen einer eines er es etwas euch
        euer für hatte hatten hier hin hinter ich ihm ihn ihnen ihr ihre im in ist jede jedem jeden jeder
        jedes jener jetzt kann kein keine man mein meine mich mir mit muss nach nicht nichts noch nun nur ob
        oder ohne sehr sein seine sich sie sind so solche soll über um und uns unser unter viel vom von vor
        war waren warst was weil weiter welche wenn wer werde werden wie wieder will wir wird wo zu zum zur
        """
    ),
    "it": _words(
        """
        a ad al alla alle allo anche che chi ci come con contro cui da dal dalla dalle degli dei del della
        delle dello di dove e ed era erano essere gli ha hanno ho i il in io la le lei li lo loro lui ma me
        mi mia mio ne negli nei nel nella nelle noi non nostro o per perché più poi quale quando quella
        quelli quello questa queste questi questo se sei si sia siamo sono su sua sue sui sul sulla suo
        tra tu tutti tutto un una uno voi
        """
    ),
    "pt": _words(
        """
        a ao aos as até com como da das de dela delas dele deles depois do dos e ela elas ele eles em entre
        era eram essa essas esse esses esta estas este estes eu foi for foram há isso isto já lhe lhes mais
        mas me mesmo meu minha muito na nas nem no nos nossa nosso não num numa o os ou para pela pelas pelo
        pelos por qual quando que quem se sem ser seu seus sua suas só também te tem tinha um uma você
        """
    ),
}
