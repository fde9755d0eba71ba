from __future__ import annotations

NARRATIVE_LEADS: list[str] = [
    "Another grey dawn seeps over the ridgeline.",
    "The wind shifts, carrying the smell of distant brine.",
    "Time loses its edges out here.",
    "A single skua wheels overhead and then is gone.",
    "The cold has a voice today, low and patient.",
    "Somewhere far behind you, the colony is waking without you.",
    "The light comes slant and thin, the color of old bone.",
    "Your breath hangs in the air like an unanswered question.",
    "The mountain does not notice you, and that is its own kind of mercy.",
    "Hours pass in the rhythm of flipper and ice.",
    "A memory of the old nesting grounds surfaces and sinks again.",
    "The sky is enormous and utterly indifferent.",
    "Snow hisses across the crust in long, restless ribbons.",
    "You count your heartbeats to keep the silence company.",
]

JOURNEY_DEFINITIONS: list[dict] = [
    {
        "id": 1,
        "title": "The Pilgrim's Ascent",
        "flavor": "A quiet climb toward a summit no penguin has ever stood upon.",
        "voice": "Contemplative and hushed, like a monk keeping a travel diary by candlelight.",
        "narrativePool": {
            "travel": [
                "You lean into the slope and let each step become a small prayer.",
                "Your feet find the old rhythm: waddle, slide, breathe, rise.",
                "You belly-slide down a gentle grade and climb the next one patiently.",
                "The path narrows, and you walk it the way one walks through a sleeping house.",
                "Mile after mile unspools beneath you like a thread from a spool of ice.",
                "You follow a seam of blue ice that seems to know where it is going.",
                "Each ridge reveals another ridge, and you greet each one without complaint.",
                "You press onward, carrying nothing but the intention to arrive.",
            ],
            "rest": [
                "You tuck your beak beneath a flipper and let the world shrink to a heartbeat.",
                "In the lee of a boulder you make a nest of stillness.",
                "You close your eyes and listen to the mountain settle around you.",
                "Rest comes slowly, like snow filling an old footprint.",
                "You huddle low, drawing warmth inward like a held breath.",
                "A shallow hollow in the drift becomes, for one night, a cathedral.",
                "You fold yourself small and let the hours wash past.",
                "Sleep arrives gently, bringing dreams of green water.",
            ],
            "forage": [
                "You chip at a thin crust of lake ice, patient as a bell-ringer.",
                "You wait at a breathing hole, motionless, a statue carved from hope.",
                "You comb the edges of a frozen stream for any glint of silver.",
                "You trace the cracks in the ice, reading them like scripture.",
                "You peer into a meltwater pool and hold very, very still.",
                "You dig along the shoreline of a forgotten tarn.",
                "You search the shadows beneath an overhang where water still moves.",
                "You lower your head to the ice and listen for the murmur of current.",
            ],
        },
        "environmentalSnippets": {
            "lowlands": [
                "The lowland snow is heavy and wet, clinging to every feather.",
                "Behind you, the sea is a dark line that refuses to disappear.",
                "Slush pools gather in the hollows, grey as dishwater.",
                "The air here still tastes of salt and home.",
                "Low hills roll away like a frozen swell.",
                "Pressure ridges from the old shoreline lie scattered like broken pottery.",
            ],
            "highPasses": [
                "Jagged obsidian teeth frame the pass on either side.",
                "The ice underfoot glows a deep cathedral blue.",
                "Wind whistles through the rocks like a distant choir.",
                "Frost ferns bloom across every sheltered stone.",
                "The pass funnels the wind into a single, endless exhalation.",
                "Far below, the lowlands have shrunk to a pale smudge.",
            ],
            "summit": [
                "The air is so thin that every thought feels sharpened.",
                "Clouds drift below you now, a slow white ocean.",
                "A crystalline silence hangs over the upper slopes.",
                "The snow here is fine as flour and squeaks beneath your feet.",
                "Sunlight splinters off the ice into a thousand small rainbows.",
                "The summit cone rises ahead, close enough to name.",
            ],
        },
        "situationalSnippets": {
            "thriving": [
                "For now, body and spirit walk in step.",
                "You feel, improbably, exactly where you are meant to be.",
                "A quiet contentment hums beneath your ribs.",
                "Your strength holds, steady as a tide.",
            ],
            "lowHealth": [
                "Your body aches in places you did not know could ache.",
                "Every movement now costs more than it returns.",
                "A tremor runs through you that will not quite settle.",
                "You move carefully, as if carrying something fragile inside.",
            ],
            "starving": [
                "Hunger gnaws at you with small, relentless teeth.",
                "Your stomach has become a hollow drum.",
                "You catch yourself dreaming of krill with embarrassing tenderness.",
                "Weakness pools in your limbs like cold water.",
            ],
            "freezing": [
                "The cold has found its way beneath your feathers.",
                "Your feet have gone numb, and the numbness is creeping upward.",
                "You shiver in long, helpless waves.",
                "Frost rims your eyes and beak.",
            ],
            "lowMorale": [
                "A heavy doubt settles over you like a second snowfall.",
                "You wonder, not for the first time, why you left.",
                "The summit feels like a rumor rather than a place.",
                "Loneliness walks beside you, matching your pace.",
            ],
            "blizzard": [
                "The blizzard erases the world beyond the end of your beak.",
                "Snow drives sideways in stinging, furious sheets.",
                "The storm howls as if it has a grievance with you personally.",
                "You cannot tell earth from sky in the whiteout.",
            ],
        },
        "fixedEvents": [
            {
                "distance": 100,
                "event": {
                    "title": "The Abandoned Rookery",
                    "description": "You come upon a ring of old nests, long deserted, their stones still arranged with care.",
                    "eventType": "Discovery",
                    "options": [
                        {
                            "text": "Sit among the nests for a while",
                            "outcome": "A moment of peace",
                            "detailedOutcome": "You settle into a stranger's nest and feel the echo of a thousand lost families. The grief is gentle, and it steadies you.",
                            "statChanges": {"morale": 20, "warmth": -5},
                        },
                        {
                            "text": "Search the rookery for supplies",
                            "outcome": "Old stores uncovered",
                            "detailedOutcome": "Beneath a collapsed wall you find a frozen cache of fish, preserved by the cold like a gift left for you.",
                            "statChanges": {"fish": 2, "warmth": -10},
                        },
                    ],
                },
            },
            {
                "distance": 250,
                "event": {
                    "title": "The Ice Bridge",
                    "description": "A slender bridge of blue ice spans a crevasse. The long way around will cost you hours in the cold.",
                    "eventType": "Hazard",
                    "options": [
                        {
                            "text": "Cross the bridge",
                            "outcome": "A narrow escape",
                            "detailedOutcome": "The bridge groans beneath you and a chunk falls away into the dark, but you reach the far side shaking and alive.",
                            "statChanges": {"health": -15, "morale": 10},
                        },
                        {
                            "text": "Take the long way around",
                            "outcome": "Safe but bitter",
                            "detailedOutcome": "You skirt the crevasse for hours, the wind chewing at you the whole way. Safe, but colder and hungrier than before.",
                            "statChanges": {"warmth": -15, "hunger": -10},
                        },
                    ],
                },
            },
            {
                "distance": 420,
                "event": {
                    "title": "The Watcher on the Ridge",
                    "description": "An old albatross perches on a ledge above you, studying you with unsettling calm.",
                    "eventType": "Encounter",
                    "options": [
                        {
                            "text": "Ask the albatross the way",
                            "outcome": "Wisdom shared",
                            "detailedOutcome": "The albatross tilts its great head toward a hidden ledge path. 'Few come this far,' it seems to say. 'Fewer turn back.'",
                            "statChanges": {"morale": 15, "health": 5},
                        },
                        {
                            "text": "Keep your eyes down and press on",
                            "outcome": "Solitude kept",
                            "detailedOutcome": "You pass beneath the ledge without a word. The albatross watches until you are gone, and the silence afterward feels heavier.",
                            "statChanges": {"morale": -10},
                        },
                        {
                            "text": "Offer it a fish",
                            "outcome": "A strange kinship",
                            "detailedOutcome": "The albatross accepts your offering with grave dignity and, in return, shelters you beneath one vast wing until your shivering stops.",
                            "statChanges": {"fish": -1, "warmth": 30, "morale": 10},
                        },
                    ],
                },
            },
        ],
    },
    {
        "id": 2,
        "title": "The Exile's Road",
        "flavor": "Cast out of the colony, you climb to prove something to no one in particular.",
        "voice": "Bitter, wry and defiant; a castaway muttering jokes into the wind.",
        "narrativePool": {
            "travel": [
                "You stomp uphill, muttering the speech you should have given the elders.",
                "One foot, then the other. Revolutionary stuff.",
                "You march on, because stopping would mean they were right.",
                "You slide down a slope with all the grace of a dropped sack of krill.",
                "The trail climbs, and you climb with it out of sheer spite.",
                "You waddle past a boulder that looks exactly like the colony chief.",
                "You cover ground at a pace best described as stubborn.",
                "The miles do not care about you, and frankly the feeling is mutual.",
            ],
            "rest": [
                "You flop into a snowbank with theatrical exhaustion.",
                "You rest, telling yourself it is strategy and not surrender.",
                "You wedge yourself into a crack in the rock and glare at the weather.",
                "You sleep badly, dreaming of a trial you keep losing.",
                "You build a wall of snow and sulk behind it, warming slowly.",
                "You curl up and pretend the wind is applause.",
                "You rest your flippers and your grudges, briefly.",
                "You doze off mid-complaint.",
            ],
            "forage": [
                "You jab at the ice with your beak as though it owes you money.",
                "You pace the frozen shallows, scowling at every shadow.",
                "You pry at a crack in the lake ice, swearing under your breath.",
                "You stake out a fishing hole with the patience of the deeply aggrieved.",
                "You rummage through a drift, ever hopeful and never optimistic.",
                "You lurk beside a meltwater channel like a tiny, feathered bandit.",
                "You glare into a pool until something, anything, moves.",
                "You dig, because the alternative is thinking.",
            ],
        },
        "environmentalSnippets": {
            "lowlands": [
                "The lowlands are grey slush and petty puddles.",
                "You can still see the colony's smoke, which is rude of it.",
                "The sea grumbles behind you like an old argument.",
                "Wet snow soaks through to your very opinions.",
                "The flats stretch out, boring and endless.",
                "Gulls squabble along the tideline, a colony in miniature.",
            ],
            "highPasses": [
                "The pass is all knife-edges and bad decisions.",
                "Black rock juts from the ice like broken teeth.",
                "The wind shrieks through the gap, opinionated as ever.",
                "Blue ice glitters, beautiful and completely unhelpful.",
                "The trail zigzags as if designed by a committee.",
                "Loose scree skitters away at every step.",
            ],
            "summit": [
                "Up here the air is thin enough to make your jokes land harder.",
                "The clouds lie below you, finally somebody beneath you.",
                "The silence is so total it almost feels like an insult.",
                "Snow crystals sparkle as if the mountain is showing off.",
                "The peak looms ahead, smug and unbothered.",
                "Everything is white, bright and far too quiet.",
            ],
        },
        "situationalSnippets": {
            "thriving": [
                "Against all odds, you feel annoyingly good.",
                "Your strength holds, which would surely disappoint the elders.",
                "You are, for the moment, unstoppable. Mildly.",
                "Defiance keeps you warmer than any fire.",
            ],
            "lowHealth": [
                "Your body files a series of formal complaints.",
                "Each step hurts, which you decide to take personally.",
                "You are bruised, battered and running on pride.",
                "Something inside you is clearly broken, probably your judgment.",
            ],
            "starving": [
                "Your stomach growls loud enough to start an avalanche.",
                "You would trade your dignity for a single sardine.",
                "Hunger has become your loudest companion.",
                "You are thin enough now to be blown off the mountain.",
            ],
            "freezing": [
                "You are cold in ways that feel philosophical.",
                "Your feathers have given up and so, nearly, have you.",
                "Ice forms on your eyebrows, which you did not know you had.",
                "You shiver so hard your teeth would chatter, if you had teeth.",
            ],
            "lowMorale": [
                "Maybe the elders had a point. No. Absolutely not.",
                "The fire in your chest has dwindled to a sulky ember.",
                "You wonder if anyone back home has even noticed you're gone.",
                "Pride is a thin blanket on a night like this.",
            ],
            "blizzard": [
                "The blizzard screams at you like a disappointed parent.",
                "Snow whips past sideways, furious and pointless.",
                "You cannot see a thing, which is honestly an improvement.",
                "The storm hammers you with tireless enthusiasm.",
            ],
        },
        "fixedEvents": [
            {
                "distance": 100,
                "event": {
                    "title": "The Rival",
                    "description": "A young penguin from your old colony has followed your tracks. They claim they want to join you.",
                    "eventType": "Encounter",
                    "options": [
                        {
                            "text": "Welcome the company",
                            "outcome": "An unexpected friend",
                            "detailedOutcome": "You walk together for a day, trading stories and insults, before they turn for home. The path feels less lonely afterward.",
                            "statChanges": {"morale": 25, "fish": -1},
                        },
                        {
                            "text": "Send them home",
                            "outcome": "Alone again",
                            "detailedOutcome": "You tell them the mountain is no place for followers. They leave, and you hate how quiet it becomes.",
                            "statChanges": {"morale": -10, "hunger": 5},
                        },
                    ],
                },
            },
            {
                "distance": 250,
                "event": {
                    "title": "Leopard Seal Tracks",
                    "description": "Fresh drag marks cross the snow toward a dark breathing hole. Something large hunts here.",
                    "eventType": "Hazard",
                    "options": [
                        {
                            "text": "Raid the seal's cache",
                            "outcome": "Bold theft",
                            "detailedOutcome": "You snatch fish from the seal's stash and flee as the water erupts behind you. A tooth grazes your flank.",
                            "statChanges": {"fish": 3, "health": -20},
                        },
                        {
                            "text": "Give the hole a wide berth",
                            "outcome": "Discretion wins",
                            "detailedOutcome": "You detour wide across exposed ice, muttering about cowardice, and arrive intact but chilled to the bone.",
                            "statChanges": {"warmth": -15},
                        },
                    ],
                },
            },
            {
                "distance": 420,
                "event": {
                    "title": "The Cairn of Names",
                    "description": "A cairn of flat stones bears scratched marks: the names of exiles who came before you.",
                    "eventType": "Discovery",
                    "options": [
                        {
                            "text": "Scratch your own name into a stone",
                            "outcome": "A mark left",
                            "detailedOutcome": "Your name joins the others. For the first time, exile feels less like an ending and more like a lineage.",
                            "statChanges": {"morale": 20, "warmth": -5},
                        },
                        {
                            "text": "Shelter behind the cairn",
                            "outcome": "Warmth borrowed",
                            "detailedOutcome": "You press against the stones out of the wind, and the ghosts of other exiles keep you company through the night.",
                            "statChanges": {"warmth": 25, "hunger": -5},
                        },
                    ],
                },
            },
        ],
    },
    {
        "id": 3,
        "title": "The Cartographer's Folly",
        "flavor": "Armed with curiosity and a terrible sense of direction, you set out to map the roof of the world.",
        "voice": "Curious and meticulous; the field notes of an earnest amateur naturalist.",
        "narrativePool": {
            "travel": [
                "You pace out the distance carefully, losing count twice.",
                "You note the gradient, the snow depth and a suspicious lack of landmarks.",
                "You travel north, or possibly east; the notes are unclear.",
                "You follow the contour of the slope, sketching it in your head.",
                "You advance steadily, naming every notable rock as you pass.",
                "You cross a saddle between two peaks and record it as Saddle One.",
                "You measure your progress in flipper-lengths, then give up and just walk.",
                "You climb, pausing occasionally to admire the stratification of the ice.",
            ],
            "rest": [
                "You make camp and review the day's observations.",
                "You rest and revise your map, which is mostly question marks.",
                "You settle in and catalogue the sounds of the night.",
                "You nap with one eye open, in the interest of science.",
                "You huddle against a rock and record the temperature as very.",
                "You rest, composing a monograph on the many textures of snow.",
                "You curl up and dream of perfectly labeled coastlines.",
                "You take an enforced pause for data consolidation and warmth.",
            ],
            "forage": [
                "You survey a frozen pond for signs of aquatic life.",
                "You conduct a systematic search of the ice shelf, grid by grid.",
                "You test three breathing holes and record the results.",
                "You examine a meltwater stream with scholarly intensity.",
                "You dig a sample trench through the drift.",
                "You observe the ice for the telltale shimmer of fish below.",
                "You probe a crack in the lake surface with cautious optimism.",
                "You collect specimens, some of which may even be edible.",
            ],
        },
        "environmentalSnippets": {
            "lowlands": [
                "Lowland terrain: flat, damp and thoroughly unremarkable.",
                "The coastal plain shows evidence of recent thaw.",
                "Sea smoke drifts inland, obscuring several would-be landmarks.",
                "The snowpack here is shallow and distressingly slushy.",
                "A line of drift ridges marks the prevailing wind.",
                "You note a colony of lichens clinging to a lonely boulder.",
            ],
            "highPasses": [
                "The pass exhibits classic glacial scouring along both walls.",
                "Basalt outcrops break through the ice in dramatic columns.",
                "Wind speed: considerable. Wind direction: everywhere.",
                "The blue ice here suggests great age and greater density.",
                "A cirque opens to the west, worthy of a proper name.",
                "Rime ice coats the rocks in delicate, feathery growths.",
            ],
            "summit": [
                "Altitude: high. Oxygen: disappointing.",
                "A sea of cloud lies below, obscuring everything you meant to map.",
                "The summit snow is dry, fine and scientifically fascinating.",
                "Ice crystals hang suspended in the air like a scattered star chart.",
                "The silence up here defies measurement.",
                "The highest peak lies just ahead, begging to be surveyed.",
            ],
        },
        "situationalSnippets": {
            "thriving": [
                "Physical condition: excellent. Spirits: cartographically high.",
                "You feel robust enough to survey the entire range.",
                "All vital signs are within acceptable parameters.",
                "Curiosity carries you farther than your feet alone could.",
            ],
            "lowHealth": [
                "Condition note: injuries accumulating at an unscientific rate.",
                "You record your own symptoms with growing concern.",
                "Your body is becoming a case study in endurance.",
                "Observation: everything hurts.",
            ],
            "starving": [
                "Caloric intake has fallen below recommended levels.",
                "You catch yourself sketching fish instead of terrain.",
                "Hunger is clouding your measurements.",
                "Food supplies: critical. Hypothesis: you need to eat.",
            ],
            "freezing": [
                "Core temperature declining. Recommend immediate warmth.",
                "Your pencil hand, metaphorically speaking, has stopped working.",
                "Frost is forming on your notes and your feathers alike.",
                "You have discovered new and exciting forms of cold.",
            ],
            "lowMorale": [
                "The map feels pointless tonight; the mountain is too big for paper.",
                "You wonder if anyone will ever read your field notes.",
                "Morale observation: low, trending lower.",
                "The blank spaces on the map begin to feel like your own.",
            ],
            "blizzard": [
                "Visibility: zero. Mapping: suspended indefinitely.",
                "The blizzard has erased every landmark you had so carefully named.",
                "Snowfall rate exceeds all previous observations.",
                "The storm is a chaotic system you have no hope of charting.",
            ],
        },
        "fixedEvents": [
            {
                "distance": 100,
                "event": {
                    "title": "The Frozen Specimen",
                    "description": "Embedded in clear ice lies a perfectly preserved fish of a species you have never seen.",
                    "eventType": "Discovery",
                    "options": [
                        {
                            "text": "Document it thoroughly",
                            "outcome": "A scientific triumph",
                            "detailedOutcome": "You spend hours sketching every scale. It is the finest entry in your notes, and your heart swells even as your feet freeze.",
                            "statChanges": {"morale": 25, "warmth": -15},
                        },
                        {
                            "text": "Chip it out and eat it",
                            "outcome": "Science is hungry work",
                            "detailedOutcome": "You extract the specimen and, with a small apology to posterity, eat it. It tastes faintly of history.",
                            "statChanges": {"hunger": 25, "morale": -5},
                        },
                    ],
                },
            },
            {
                "distance": 250,
                "event": {
                    "title": "The Whiteout Valley",
                    "description": "A valley ahead is filled with drifting fog. Your map suggests a shortcut through it, though your map is mostly guesses.",
                    "eventType": "Hazard",
                    "options": [
                        {
                            "text": "Trust the map",
                            "outcome": "Lost in the fog",
                            "detailedOutcome": "The map was, predictably, wrong. You wander for hours before stumbling back onto the ridge, exhausted and chastened.",
                            "statChanges": {"hunger": -15, "warmth": -10, "morale": -5},
                        },
                        {
                            "text": "Wait for the fog to lift",
                            "outcome": "Patience rewarded",
                            "detailedOutcome": "You hunker down and wait. By evening the fog parts to reveal a perfect view of the range, and you map it all.",
                            "statChanges": {"warmth": -10, "morale": 15},
                        },
                    ],
                },
            },
            {
                "distance": 420,
                "event": {
                    "title": "The Old Survey Marker",
                    "description": "A weathered pole stands on a rise, hung with faded ribbons. Someone has mapped this mountain before you.",
                    "eventType": "Discovery",
                    "options": [
                        {
                            "text": "Study the marker",
                            "outcome": "Knowledge inherited",
                            "detailedOutcome": "Scratches on the pole show a safe route to the summit. You are not the first, but you may be the first to finish.",
                            "statChanges": {"morale": 15, "health": 10},
                        },
                        {
                            "text": "Dig for a cache beneath it",
                            "outcome": "Supplies recovered",
                            "detailedOutcome": "Beneath the pole lies a frozen bundle of fish, left by a fellow traveler with impeccable foresight.",
                            "statChanges": {"fish": 3, "warmth": -10},
                        },
                    ],
                },
            },
        ],
    },
]
