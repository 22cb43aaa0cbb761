"""First part of the 4096-word mnemonic word list: the words from "aback" to "kuwait"."""

from __future__ import annotations

# Words are listed by initial letter, separated by whitespace, in word-index order.
_RAW = """
aback abbey abbot abide ablaze able aboard abode abort abound
about above abra abroad abrupt absent absorb absurd accent accept
access accord accuse ace ache aching acid acidic acorn acre
across act action active actor actual acute adam adapt add
added adept adhere adjust admire admit adobe adopt adrift adverb
advert aedes aerial afar affair affect afford afghan afield afloat
afraid afresh after again age agency agenda agent aghast agile
ago agony agree agreed aha ahead aid aide aim air
airman airy akin alarm alaska albeit album alert alibi alice
alien alight align alike alive alkali all allars allay alley
allied allot allow alloy ally almond almost aloft alone along
aloof aloud alpha alpine also altar alter always amaze amazon
amber ambush amen amend amid amidst amiss among amount ample
amuse anchor and andrew anew angel anger angle anglo angola
animal ankle annoy annual answer anthem anti antony anubis any
anyhow anyway apart apathy apex apiece appeal appear apple apply
april apron arcade arcane arch arctic ardent are area argue
arid arise arm armful armpit army aroma around arouse array
arrest arrive arrow arson art artery artful artist ascent ashen
ashore aside ask asleep aspect assay assent assert assess asset
assign assist assume assure asthma astute asylum ate athens atlas
atom atomic atop attach attain attend attic auburn audio audit
augite august aunt auntie aura austin auteur author auto autumn
avail avenge avenue avert avid avoid await awake awaken award
aware awash away awful awhile axes axiom axis axle aye

baby bach back backup bacon bad badge badly bag baggy
bail bait bake baker bakery bald ball ballad ballet ballot
baltic bamboo ban banal banana band banjo bank bar barber
bare barely barge baric bark barley barn baron barrel barren
basalt base basic basil basin basis basket basque bass bat
batch bath bathe baton battle bay beach beacon beak beam
bean bear beard beat beauty become bed beech beef beefy
beep beer beet beetle before beggar begin behalf behave behind
beige being belfry belief bell belly belong below belt bench
bend bended benign bent berlin berry berth beset beside best
bestow bet beta betray better betty beware beyond bias biceps
bicker bid big bike bile bill binary bind biopsy birch
bird birdie birth bishop bit bite bitter blade blame bland
blaser blast blaze bleak blend bless blew blink blip bliss
blitz block blond blood bloom blot blouse blue bluff blunt
blur blush boar board boast boat bocage bodily body bogus
boil bold bolt bombay bond bone bonn bonnet bonus bony
book boost boot booth booze bop border bore borrow bosom
boss boston both bother bottle bottom bought bounce bound bounty
bout bovine bow bowel bowl box boy boyish brace brain
brainy brake bran branch brand brandy brass brave bravo brazil
breach bread break breath bred breed breeze brew brick bride
bridge brief bright brim brine bring brink brisk briton broad
broke broken bronze brook broom brown bruise brush brutal brute
bubble buck bucket buckle buddha budget buen buffet buggy build
bulb bulge bulk bulky bull bullet bully bump bumpy bunch
bundle bunk bunny burden bureau burial burly burma burned burnt
burrow burst bury bus bush bust bustle busy but butler
butter button buy buyer buzz bye byte byways

cab cabin cable cache cactus caesar cage cagey cahot cain
cairo cake cakile calf call caller calm calmly came camel
camera camp campus can canada canary cancel candid candle candy
cane canine canna canoe canopy canvas canyon cap cape car
carbon card care career caress cargo carl carnal carol carp
carpet carrot carry cart cartel case cash cask cast castle
casual cat catch cater cattle caught causal cause cave cease
celery cell cellar celtic cement censor census cereal cervix chain
chair chalet chalk chalky champ chance change chant chaos chap
chapel charge charm chart chase chat cheap cheat check cheek
cheeky cheer cheery cheese chef cherry chess chest chew chic
chick chief child chile chill chilly china chip choice choir
choose chop choppy chord chorus chose chosen choux chrome chunk
chunky cider cigar cinema circa circle circus cite city civic
civil clad claim clammy clan clap clash clasp class clause
claw clay clean clear clergy clerk clever click client cliff
climax climb clinch cling clinic clip cloak clock clone close
closer closet cloth cloud cloudy clout clown club clue clumsy
clung clutch coach coal coast coat coax cobalt cobble cobra
coca cocoa code coffee coffin cohort coil coin coke cold
collar colon colony colt column comb combat come comedy comes
comic commit common compel comply concur cone confer congo consul
convex convey convoy cook cool cope copper copy coral cord
core cork corn corner corps corpse corpus cortex cosmic cosmos
cost costia costly cosy cotton couch cough could count county
coup couple coupon course court cousin cove cover covert cow
coward cowboy crab cradle craft crafty crag crane crate crater
crawl crazy creak cream create credit creed creek creep creepy
creole crept crest crew cried crisis crisp critic croft crook
crop cross crow crowd crown crude cruel cruise crunch crush
crust crux cry crypt cuba cube cubic cuckoo cuff cult
cup curb cure curfew curl curlew curry curse cursor curve
custom cut cute cycle cyclic cynic cyprus czech

dad daddy dagger daily dairy daisy dale dallas damage damp
dampen dance danger daniel danish dare dark darken darwin dash
data date david dawn day deadly deaf deal dealer dean
dear debar debate debit debris debt debtor decade decay decent
decide deck decor decree deduce deed deep deeply deer defeat
defect defend defer define defy degree deity delay delete delhi
delphi delta demand demise demo demure denial denote dense dental
deny depart depend depict deploy depot depth deputy derby derive
desert design desist desk detail detect deter detest detour device
devise devoid devote devour dial diana diary dice dictum did
diesel diet differ digest digit dine dinghy dingus dinner diode
dire direct dirt disc disco dish disk dismal dispel ditch
divert divide divine dizzy docile dock doctor dog dogger dogma
dole doll dollar dolly domain dome domino donate done donkey
donor door dorsal dose dote double doubt dough dour dove
dower down dozen draft drag dragon drain drama drank draper
draw drawer dread dream dreamy dreary dress drew dried drift
drill drink drip drive driver drool drop drove drown drum
dry dual dublin duck duct due duel duet duke dull
duly dummy dump dune dung duress during dusk dust dusty
dutch duty dwarf dwell dyer dying dynamo

each eager eagle ear earl early earn earth ease easel
easily east easter easy eat eaten eater echo eddy eden
edge edible edict edit editor edward eerie eerily effect effort
egg ego egypt eight eighth eighty either elbow elder eldest
elect eleven elicit elite eloge else elude elves embark emblem
embryo emerge emit empire employ empty enable enamel end endure
energy engage engine enjoy enlist enough ensure entail enter entire
entre entry envoy envy enzyme epic epoch equal equate equip
equity era erase eric erode erotic errant error escape essay
essex estate esteem ethic etoile eundo europe evade eve even
event ever every evict evil evoke evolve exact exam exceed
excel except excess excise excite excuse exempt exert exile exist
exit exodus exotic expand expect expert expire export expose extend
extra exulat eye eyed

fabric face facer facial fact factor fade fail faint fair
fairly fake falcon fall false falter fame family famine famous
fan fancy far farce fare farm farmer fast fasten faster
fatal fate father fatty fault faulty fauna feast feat fed
fee feeble feed feel feels feet fell fellow felt female
femur fence fend ferry fetal fetch feudal fever few fewer
fiance fiasco fiddle field fiend fierce fiery fifth fifty fig
figure file fill filled filler film filter filth filthy final
finale find fine finish finite firm firmly first fiscal fish
fisher fit fitful five fix flag flair flak flame flank
flare flash flask flat flaw fled flee fleece fleet flesh
fleshy flew flick flight flimsy flint flirt float flock floe
flood floor floppy flora floral flour flow flower fluent fluffy
fluid flung flurry flush flute flux fly flyer foal foam
foamy focal focus fog foil foin fold folk follow folly
fond fondly font food fool foot for forbid force ford
forest forge forget fork form formal format former fort forth
forty forum fossil foster foul found four fourth fox foyer
frail frame franc france frank free freed freely freer freeze
french frenzy fresh friar friday fridge fried friend fright fringe
frock frog from front frost frosty frown frozen frugal fruit
fruity fudge fuel fulfil full fully fun fund funny fur
furry fury fuse fusion fuss fussy futile future fuzzy

gadget gag gain gala galaxy gale gall galley gallon gallop
gamble game gamma gandhi gap garage garden garlic gas gasp
gate gather gaucho gauge gaul gaunt gave gaze gear geese
gemini gender gene geneva genial genius genre gentle gently gentry
genus george get ghetto ghost giant gift giggle gill gilt
ginger girl give given glad glade glance gland glare glass
glassy gleam glee glib glide global globe gloom gloomy gloria
glory gloss glossy glove glow glue goal goat gold golden
golf gone gong good goose gorge gory gosh gospel gossip
got gothic govern gown grab grace grade grain grand grant
grape graph grasp grass grassy grate grave gravel gravy gray
grease greasy great greece greed greedy greek green greet grew
grey grid grief grill grim grin grind grip grit gritty
groan groin groom groove ground group grove grow grown growth
grudge grunt guard guess guest guide guild guilt guilty guise
guitar gulf gully gunman guru gut guy gypsy

habit hack had hague hail hair hairy haiti hale half
hall halt hamlet hammer hand handle handy hang hangar hanoi
happen happy hard hardly hare harm harp harry harsh has
hash hassle hasta haste hasten hasty hat hatch hate haul
haunt havana have haven havoc hawaii hawk hawse hazard haze
hazel hazy heal health heap hear heard heart hearth hearty
heat heater heaven heavy hebrew heck hectic hedge heel hefty
height heil heir held helium helix hello helm helmet help
hemp hence henry her herald herb herd here hereby hermes
hernia hero heroic hest hey heyday hick hidden hide high
higher highly hill him hind hindu hint hippy hire his
hiss hit hive hoard hoarse hobby hockey hold holder hollow
holly holy home honest honey hood hope hopple horrid horror
horse hose host hotbox hotel hound hour house hover how
huck huge hull human humane humble humid hung hunger hungry
hunt hurdle hurl hurry hurt hush hut hybrid hymn hyphen

ice icing icon idaho idea ideal idiom idle idly idol
ignite ignore ill image immune impact imply import impose inca
inch income incur indeed index india indian indoor induce inept
inert infant infect infer influx inform inhere inject injure injury
ink inlaid inland inlet inmate inn innate inner input insane
insect insert inset inside insist insult insure intact intake intend
inter into invade invent invest invite invoke inward iowa iran
iraq irish iron ironic irony isaac isabel islam island isle
issue italy item itself ivan ivory ivy

jacket jacob jaguar jail james japan jargon java jaw jazz
jeep jelly jerky jersey jest jet jewel jim jive job
jock jockey john join joke jolly jolt jordan joseph joy
joyful joyous judas judge judy juice juicy july jumble jumbo
jump june jungle junior junk junta jury just

kami kansas karate karl karma kedge keel keen keep keeper
kenya kept kernel kettle key khaki khaya khowar kick kidnap
kidney kin kind kindly king kiss kite kitten knack knaggy
knee knew knight knit knock knot know known koran korea
kusan kuwait
"""

_WORDS: tuple[str, ...] = tuple(_RAW.split())


def first_words() -> tuple[str, ...]:
    """Return the leading part of the word list, in word-index order, starting at index 0."""
    return _WORDS