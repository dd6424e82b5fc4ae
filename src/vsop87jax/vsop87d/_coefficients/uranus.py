"""VSOP87D periodic terms for Uranus.

Heliocentric ecliptic spherical coordinates referred to the ecliptic
and equinox of the date.  Each slot ``Xn`` holds the terms multiplying
``t**n`` for coordinate ``X`` (L = longitude [rad], B = latitude [rad],
R = radius vector [AU]) as ``(A, B, C)`` rows contributing
``A * cos(B + C * t)``, with *t* in Julian millennia from J2000.

Only the powers used by the solution are listed (3978 terms in total).

References:
    P. Bretagnon & G. Francou, "Planetary theories in rectangular and
    spherical variables. VSOP87 solutions", A&A 202, 309-315 (1988).
"""

# fmt: off

L0 = (
    (5.48129294299, 0.00000000000, 0.00000000000),
    (0.09260408252, 0.89106421530, 74.78159856730),
    (0.01504247826, 3.62719262195, 1.48447270830),
    (0.00365981718, 1.89962189068, 73.29712585900),
    (0.00272328132, 3.35823710524, 149.56319713460),
    (0.00070328499, 5.39254431993, 63.73589830340),
    (0.00068892609, 6.09292489045, 76.26607127560),
    (0.00061998592, 2.26952040469, 2.96894541660),
    (0.00061950714, 2.85098907565, 11.04570026390),
    (0.00026468869, 3.14152087888, 71.81265315070),
    (0.00025710505, 6.11379842935, 454.90936652730),
    (0.00021078897, 4.36059465144, 148.07872442630),
    (0.00017818665, 1.74436982544, 36.64856292950),
    (0.00014613471, 4.73732047977, 3.93215326310),
    (0.00011162535, 5.82681993692, 224.34479570190),
    (0.00010997934, 0.48865493179, 138.51749687070),
    (0.00009527487, 2.95516893093, 35.16409022120),
    (0.00007545543, 5.23626440666, 109.94568878850),
    (0.00004220170, 3.23328535514, 70.84944530420),
    (0.00004051850, 2.27754158724, 151.04766984290),
    (0.00003354607, 1.06549008887, 4.45341812490),
    (0.00002926671, 4.62903695486, 9.56122755560),
    (0.00003490352, 5.48305567292, 146.59425171800),
    (0.00003144093, 4.75199307603, 77.75054398390),
    (0.00002922410, 5.35236743380, 85.82729883120),
    (0.00002272790, 4.36600802756, 70.32818044240),
    (0.00002051209, 1.51773563459, 0.11187458460),
    (0.00002148599, 0.60745800902, 38.13303563780),
    (0.00001991726, 4.92437290826, 277.03499374140),
    (0.00001376208, 2.04281409054, 65.22037101170),
    (0.00001666910, 3.62744580852, 380.12776796000),
    (0.00001284183, 3.11346336879, 202.25339517410),
    (0.00001150416, 0.93344454002, 3.18139373770),
    (0.00001533223, 2.58593414266, 52.69019803950),
    (0.00001281641, 0.54269869505, 222.86032299360),
    (0.00001372100, 4.19641615561, 111.43016149680),
    (0.00001220998, 0.19901396193, 108.46121608020),
    (0.00000946195, 1.19249463066, 127.47179660680),
    (0.00001150993, 4.17898207045, 33.67961751290),
    (0.00001244342, 0.91612680579, 2.44768055480),
    (0.00001072008, 0.23564502877, 62.25142559510),
    (0.00001090461, 1.77501638912, 12.53017297220),
    (0.00000707875, 5.18285226584, 213.29909543800),
    (0.00000653401, 0.96586909116, 78.71375183040),
    (0.00000627562, 0.18210181975, 984.60033162190),
    (0.00000524495, 2.01276706996, 299.12639426920),
    (0.00000559370, 3.35776737704, 0.52126486180),
    (0.00000606827, 5.43209728952, 529.69096509460),
    (0.00000404891, 5.98689011389, 8.07675484730),
    (0.00000467211, 0.41484068933, 145.10977900970),
    (0.00000471288, 1.40664336447, 184.72728735580),
    (0.00000483219, 2.10553990154, 0.96320784650),
    (0.00000395614, 5.87039580949, 351.81659230870),
    (0.00000433532, 5.52142978255, 183.24281464750),
    (0.00000309885, 5.83301304674, 145.63104387150),
    (0.00000378609, 2.34975805006, 56.62235130260),
    (0.00000398996, 0.33810765436, 415.55249061210),
    (0.00000300379, 5.64353974146, 22.09140052780),
    (0.00000249229, 4.74617120584, 225.82926841020),
    (0.00000239334, 2.35045874708, 137.03302416240),
    (0.00000294172, 5.83916826225, 39.61750834610),
    (0.00000216480, 4.77847481363, 340.77089204480),
    (0.00000251792, 1.63696775578, 221.37585028530),
    (0.00000219621, 1.92212987979, 67.66805156650),
    (0.00000201963, 1.29693040865, 0.04818410980),
    (0.00000224097, 0.51574863468, 84.34282612290),
    (0.00000216549, 6.14211862702, 5.93789083320),
    (0.00000222588, 2.84309380331, 0.26063243090),
    (0.00000207828, 5.58020570040, 68.84370773410),
    (0.00000187474, 1.31924326253, 0.16005869440),
    (0.00000158028, 0.73811997211, 54.17467074780),
    (0.00000199146, 0.95634155010, 152.53214255120),
    (0.00000168648, 5.87874000882, 18.15924726470),
    (0.00000170300, 3.67717520688, 5.41662597140),
    (0.00000193652, 1.88800122606, 456.39383923560),
    (0.00000192998, 0.91616058506, 453.42489381900),
    (0.00000181934, 3.53624029238, 79.23501669220),
    (0.00000173145, 1.53860728054, 160.60889739850),
    (0.00000164588, 1.42379714838, 106.97674337190),
    (0.00000171968, 5.67952685533, 219.89137757700),
    (0.00000162792, 3.05029377666, 112.91463420510),
    (0.00000146653, 1.26300172265, 59.80374504030),
    (0.00000139453, 5.38597723400, 32.19514480460),
    (0.00000138585, 4.25994786673, 909.81873305460),
    (0.00000143058, 1.29995487555, 35.42472265210),
    (0.00000123840, 1.37359990336, 7.11354700080),
    (0.00000104414, 5.02820888813, 0.75075952540),
    (0.00000103277, 0.68095301267, 14.97785352700),
    (0.00000094741, 0.90674090409, 74.66972398270),
    (0.00000082978, 2.92828718445, 265.98929347750),
    (0.00000110163, 2.02685778976, 554.06998748280),
    (0.00000094226, 3.94266328260, 74.89347315190),
    (0.00000079858, 1.01446829180, 6.59228213900),
    (0.00000109376, 5.70581833286, 77.96299230500),
    (0.00000085876, 1.70649435603, 82.85835341460),
    (0.00000103562, 1.45770270246, 24.37902238820),
    (0.00000074667, 4.63177552576, 69.36497259590),
    (0.00000079919, 3.00974084247, 297.64192156090),
    (0.00000084502, 0.36887189574, 186.21176006410),
    (0.00000088810, 0.52481330563, 181.75834193920),
    (0.00000070303, 1.18986880009, 66.70484372000),
    (0.00000069965, 0.87476081875, 305.34616939270),
    (0.00000069927, 3.76102749315, 131.40394986990),
    (0.00000084604, 5.88725183325, 256.53994050650),
    (0.00000074341, 6.24271323846, 447.79581952650),
    (0.00000062310, 0.16901376623, 479.28838891550),
    (0.00000072726, 2.84892775693, 462.02291352810),
    (0.00000069060, 4.43934854374, 39.35687591520),
    (0.00000076568, 4.58721110340, 6.21977512350),
    (0.00000073387, 4.27603448634, 87.31177153950),
    (0.00000055307, 1.49636544147, 71.60020482960),
    (0.00000057291, 1.63015165542, 143.62530630140),
    (0.00000061661, 3.18604743524, 77.22927912210),
    (0.00000057634, 3.67180685401, 51.20572533120),
    (0.00000050289, 1.12279384633, 20.60692781950),
    (0.00000053744, 5.51890986247, 128.95626931510),
    (0.00000057894, 2.66877593418, 381.61224066830),
    (0.00000058112, 1.58629352171, 60.76695288680),
    (0.00000045382, 0.48053933052, 14.01464568050),
    (0.00000037581, 6.06822931932, 211.81462272970),
    (0.00000038640, 3.43597050177, 153.49535039770),
    (0.00000046087, 4.36201639577, 75.74480641380),
    (0.00000040088, 4.57333927519, 46.20979048510),
    (0.00000034229, 2.93967782207, 140.00196957900),
    (0.00000038669, 5.58941074168, 99.16062095550),
    (0.00000034827, 1.02792863024, 203.73786788240),
    (0.00000040024, 0.69889667397, 218.40690486870),
    (0.00000032538, 4.21625657443, 200.76892246580),
    (0.00000031865, 5.50961503408, 72.33391801250),
    (0.00000041695, 3.82438031124, 81.00137369080),
    (0.00000034795, 0.39363490236, 1.37259812370),
    (0.00000039775, 6.05600836903, 293.18850343600),
    (0.00000027577, 2.18261286374, 125.98732389850),
    (0.00000036279, 1.66586085405, 258.02441321480),
    (0.00000035442, 1.96652806541, 835.03713448730),
    (0.00000035361, 3.72258690030, 692.58748435350),
    (0.00000027323, 2.10164372072, 209.36694217490),
    (0.00000026530, 4.48265986115, 373.90799283650),
    (0.00000034472, 1.07907945481, 191.20769491020),
    (0.00000029915, 3.87358632506, 259.50888592310),
    (0.00000026233, 3.63172504384, 490.33408917940),
    (0.00000025848, 0.54461409359, 41.64449777560),
    (0.00000026989, 6.27711247734, 28.57180808220),
    (0.00000026391, 5.81110061049, 75.30286342910),
    (0.00000034227, 6.05617272657, 275.55052103310),
    (0.00000024279, 3.18776564878, 81.37388070630),
    (0.00000029937, 1.88789751816, 269.92144674060),
    (0.00000026235, 6.20105251336, 134.58534360760),
    (0.00000022754, 0.92919725789, 288.08069400530),
    (0.00000025180, 5.42547381962, 116.42609634290),
    (0.00000022715, 0.53098783687, 1514.29129671650),
    (0.00000026485, 4.77176167929, 284.14854074220),
    (0.00000027008, 4.75281624832, 41.10198105440),
    (0.00000021972, 4.58613057386, 404.50679034820),
    (0.00000022012, 1.84389287183, 617.80588578620),
    (0.00000024694, 4.70875195490, 378.64329525170),
    (0.00000028949, 0.17127584792, 528.20649238630),
    (0.00000020492, 0.10285646641, 195.13984817330),
    (0.00000020696, 5.62143477633, 55.65914345610),
    (0.00000025843, 0.74627159338, 278.51946644970),
    (0.00000022990, 3.58378694661, 1.59634729290),
    (0.00000021843, 0.05733533568, 173.94221952280),
    (0.00000019050, 2.30351091243, 5.10780943070),
    (0.00000020675, 2.64113858585, 105.49227066360),
    (0.00000021856, 5.87352402691, 45.57665103870),
    (0.00000021120, 1.98081790016, 114.39910691340),
    (0.00000019279, 2.84304025179, 159.12442469020),
    (0.00000019061, 0.50598371738, 67.35923502580),
    (0.00000020434, 3.77601951414, 135.54855145410),
    (0.00000017326, 4.47793157645, 120.35824960600),
    (0.00000020547, 0.88695598555, 255.05546779820),
    (0.00000019320, 1.48569290504, 0.89377187730),
    (0.00000021331, 2.74470023060, 28.31117565130),
    (0.00000017582, 4.09139636700, 296.15744885260),
    (0.00000015918, 3.94525074972, 17.52610781830),
    (0.00000015562, 0.92748407689, 300.61086697750),
    (0.00000016439, 0.30868798605, 30.71067209630),
    (0.00000015237, 4.93048601827, 7.42236354150),
    (0.00000019284, 6.21950083268, 329.83706636550),
    (0.00000013860, 0.56255266406, 144.14657116320),
    (0.00000016206, 2.30292598693, 344.70304530790),
    (0.00000016041, 0.19723295436, 103.09277421860),
    (0.00000014414, 2.57606243208, 230.56457082540),
    (0.00000016789, 4.93540052916, 565.11568774670),
    (0.00000017052, 1.81844925116, 294.67297614430),
    (0.00000016766, 0.27542186330, 73.81839072080),
    (0.00000015428, 1.91577056305, 96.87299909510),
    (0.00000015718, 3.87095025861, 98.89998852460),
    (0.00000011923, 6.17545505441, 44.72531777680),
    (0.00000012407, 6.22419970167, 80.19822453870),
    (0.00000013040, 1.99652993223, 27.08733537390),
    (0.00000013229, 3.43782440072, 227.31374111850),
    (0.00000011669, 4.31526860843, 426.59819087600),
    (0.00000014378, 5.78353646474, 1059.38193018920),
    (0.00000015879, 0.98454960055, 6208.29425142410),
    (0.00000011158, 1.74417430690, 220.41264243880),
    (0.00000011989, 5.84388657950, 13.33332212430),
    (0.00000011386, 2.55925734515, 19.12245511120),
    (0.00000013281, 5.39472153462, 391.17346822390),
    (0.00000012295, 4.57340278496, 23.57587323610),
    (0.00000012827, 1.77410269070, 180.27386923090),
    (0.00000011651, 4.29138607818, 142.44965013380),
    (0.00000012248, 2.44241346243, 100.38446123290),
    (0.00000012421, 2.32591770919, 80.71948940050),
    (0.00000009774, 0.39898140151, 7.86430652620),
    (0.00000013172, 2.74099358938, 177.87437278590),
    (0.00000012262, 5.42795591646, 831.10498122420),
    (0.00000010272, 5.90194483926, 74.52096613640),
    (0.00000009317, 3.75869700774, 74.82978267710),
    (0.00000010701, 4.00709797731, 235.39049596580),
    (0.00000009243, 5.38492199672, 20.44686912510),
    (0.00000009461, 2.60126707172, 92.30770638560),
    (0.00000012066, 5.52163100220, 74.26033370550),
    (0.00000010836, 1.88393779293, 241.61027108930),
    (0.00000009317, 1.16483658310, 74.73341445750),
    (0.00000010718, 5.50310449842, 187.69623277240),
    (0.00000012057, 6.02120050390, 154.01661525950),
    (0.00000009124, 1.15458738606, 0.63313944640),
    (0.00000011526, 6.26425302826, 155.78297225810),
    (0.00000012200, 5.79400179483, 1364.72809958190),
    (0.00000010979, 5.76614513865, 628.85158605010),
    (0.00000008532, 5.18016456150, 1.64453140270),
    (0.00000008660, 3.78133822411, 74.94165726170),
    (0.00000011227, 1.30788626675, 604.47256366190),
    (0.00000010531, 1.05867421534, 291.70403072770),
    (0.00000008446, 3.52020067595, 756.32338265690),
    (0.00000010291, 5.30493908317, 75.04223099820),
    (0.00000008015, 6.24347048958, 543.02428721890),
    (0.00000007796, 5.23497582886, 58.10682401090),
    (0.00000009310, 1.65210713729, 24.11838995730),
    (0.00000008642, 1.14285691458, 74.62153987290),
    (0.00000007797, 4.00208030502, 31.49256938900),
    (0.00000008915, 3.63129389881, 408.43894361130),
    (0.00000007191, 4.24536221306, 110.20632121940),
    (0.00000009764, 0.10205649809, 366.48562929500),
    (0.00000008710, 2.25910759480, 451.94042111070),
    (0.00000009430, 2.00492467431, 331.32153907380),
    (0.00000009008, 1.63146330622, 443.86366626340),
    (0.00000007247, 4.35313018726, 88.11492069160),
    (0.00000007659, 0.61918159043, 50.40257617910),
    (0.00000006836, 5.12190844483, 0.80314915210),
    (0.00000009367, 1.42664537007, 414.06801790380),
    (0.00000008136, 0.45279998999, 25.60286266560),
    (0.00000009199, 2.41000352664, 10138.50394764370),
    (0.00000006896, 5.85017813531, 339.28641933650),
    (0.00000006487, 6.03397141885, 1.22384027740),
    (0.00000007186, 4.00480285222, 157.63995198190),
    (0.00000008130, 0.21907525983, 422.66603761290),
    (0.00000008022, 2.09953974305, 92.94084583200),
    (0.00000006371, 4.47820781123, 79.88940799800),
    (0.00000007957, 5.86499639179, 760.25553592000),
    (0.00000008383, 2.33782809093, 417.03696332040),
    (0.00000007931, 3.41952210669, 7.70424783180),
    (0.00000006613, 1.39197711439, 16.67477455640),
    (0.00000007142, 5.57864813931, 4.73530241520),
    (0.00000007441, 0.48121969777, 68.18931642830),
    (0.00000007187, 0.50441238918, 457.87831194390),
    (0.00000006613, 2.84628770892, 142.14083359310),
    (0.00000006399, 3.88681409308, 74.03083904190),
    (0.00000006140, 1.65776909220, 350.33211960040),
    (0.00000007053, 0.13890020306, 306.83064210100),
    (0.00000006010, 5.46434004640, 48.75804477640),
    (0.00000006810, 6.15448079403, 67.88049988760),
    (0.00000005982, 2.36098472874, 2.00573757010),
    (0.00000005709, 1.49928444044, 206.18554843720),
    (0.00000006843, 1.08172913275, 465.95506679120),
    (0.00000006408, 5.07331258075, 4.66586644600),
    (0.00000007805, 3.98866710061, 3.62333672240),
    (0.00000005527, 5.57881556653, 2.92076130680),
    (0.00000005521, 3.38225987040, 149.45132255000),
    (0.00000006107, 1.95504762856, 216.92243216040),
    (0.00000005692, 2.83076925167, 260.99335863140),
    (0.00000006586, 2.71085048651, 329.72519178090),
    (0.00000005826, 3.98800970226, 347.88443904560),
    (0.00000005745, 0.49160564101, 0.37250701550),
    (0.00000005473, 5.69158856279, 1.69692102940),
    (0.00000004982, 2.40870746521, 342.25536475310),
    (0.00000006040, 4.78944090986, 558.00214074590),
    (0.00000005317, 2.78403764459, 13.49338081870),
    (0.00000005090, 5.47747622578, 372.42352012820),
    (0.00000004894, 1.77082918618, 333.65734504400),
    (0.00000005389, 2.94076732149, 9.40116886120),
    (0.00000004757, 5.37129102802, 61.28821774860),
    (0.00000005000, 3.43988321744, 518.64526483070),
    (0.00000005664, 3.30309284254, 0.65439130580),
    (0.00000005530, 0.45092393824, 162.09337010680),
    (0.00000005746, 3.45964923866, 55.13787859430),
    (0.00000005666, 1.23578675332, 328.35259365720),
    (0.00000005071, 5.42033080481, 977.48678462110),
    (0.00000005719, 0.66718965817, 92.04707395470),
    (0.00000004994, 1.29267872727, 983.11585891360),
    (0.00000005570, 2.36255927193, 6.90109867970),
    (0.00000005189, 2.40682220291, 58.31927233200),
    (0.00000005502, 0.13301359232, 149.67507171920),
    (0.00000004706, 1.85473330365, 119.50691634410),
    (0.00000004305, 4.18171934306, 90.82323367730),
    (0.00000005953, 1.73036741041, 152.74459087230),
    (0.00000005607, 5.53187692339, 1087.69310584050),
    (0.00000005591, 5.75072223569, 358.93013930950),
    (0.00000004441, 0.97726075887, 4.19278569400),
    (0.00000004608, 3.31800103668, 89.75945209430),
    (0.00000004677, 5.01422713233, 43.12897048390),
    (0.00000004034, 1.08242564328, 75.53235809270),
    (0.00000005626, 1.10270225604, 66.91729204110),
    (0.00000004058, 1.94012136050, 17.26547538740),
    (0.00000004770, 2.24207019076, 986.08480433020),
    (0.00000005207, 1.36600428910, 767.36908292080),
    (0.00000004940, 0.13733547633, 0.85133326190),
    (0.00000004339, 5.33814728291, 152.01087768940),
    (0.00000003917, 3.85320550575, 2.28762186040),
    (0.00000003903, 5.87573410158, 16.46232623530),
    (0.00000004655, 0.93665017107, 267.47376618580),
    (0.00000004638, 5.42566923517, 16.04163511000),
    (0.00000005177, 3.40845690805, 1289.94650101460),
    (0.00000003825, 0.59888105730, 210.33015002140),
    (0.00000005048, 2.16732539242, 367.97010200330),
    (0.00000003819, 1.70901925915, 5.62907429250),
    (0.00000005004, 0.26759264038, 403.13419222450),
    (0.00000004202, 5.12029089394, 19.01058052660),
    (0.00000004472, 2.88978371811, 59.28248017850),
    (0.00000004700, 4.17709035394, 130.44074202340),
    (0.00000004487, 0.85521839581, 969.62247809490),
    (0.00000003802, 4.59721371468, 25.86349509650),
    (0.00000004024, 4.98868930941, 30.05628079050),
    (0.00000004722, 6.16359211847, 173.68158709190),
    (0.00000004732, 3.76697693308, 373.01422095920),
    (0.00000003542, 0.76768843819, 114.13847448250),
    (0.00000003370, 2.00021522907, 286.59622129700),
    (0.00000003626, 3.20240733896, 991.71387862270),
    (0.00000004028, 0.46802022168, 387.24131496080),
    (0.00000003442, 5.20959733350, 894.84087952760),
    (0.00000003273, 5.46374958434, 192.69216761850),
    (0.00000003291, 3.97847646998, 264.50482076920),
    (0.00000003291, 1.62538722379, 681.54178408960),
    (0.00000003198, 3.96580804800, 146.38180339690),
    (0.00000004016, 1.40657464840, 383.09671337660),
    (0.00000003844, 3.60271287642, 0.59070083100),
    (0.00000003123, 4.50215520755, 1439.50969814920),
    (0.00000003434, 5.18704419009, 97.41551581630),
    (0.00000003123, 4.14198630214, 76.47851959670),
    (0.00000003259, 1.65410614252, 214.78356814630),
    (0.00000003557, 4.15769848885, 68.56182344380),
    (0.00000002934, 2.95575531139, 120.99138905240),
    (0.00000002914, 3.69930995976, 874.39401040250),
    (0.00000003301, 2.14570582133, 253.57099508990),
    (0.00000003362, 4.82277888708, 19.64371997300),
    (0.00000003218, 2.56428709831, 60.55450456570),
    (0.00000003059, 3.57539890234, 117.91056905120),
    (0.00000003073, 3.54739757836, 95.38852638680),
    (0.00000002789, 0.65190913388, 42.53826965290),
    (0.00000003235, 5.31608088666, 546.95644048200),
    (0.00000003657, 5.89905956226, 16.15350969460),
    (0.00000003549, 2.76314903735, 82.48584639910),
    (0.00000003627, 4.68663059919, 593.42686339800),
    (0.00000003306, 1.57486085317, 312.45971639350),
    (0.00000003602, 2.51921910142, 22.89454967990),
    (0.00000003431, 4.95532928836, 49.72125262290),
    (0.00000002675, 2.41314606353, 29.20494752860),
    (0.00000003101, 1.42849885249, 17.63798240290),
    (0.00000003399, 3.02815712113, 88.79624424780),
    (0.00000003379, 2.65894323745, 771.30123618390),
    (0.00000002547, 6.10642153361, 455.87257437380),
    (0.00000002967, 0.31461418738, 150.52640498110),
    (0.00000002681, 1.16839594153, 477.80391620720),
    (0.00000003343, 3.09880618811, 552.58551477450),
    (0.00000002678, 1.42841144096, 1.11196569280),
    (0.00000002540, 1.94053883528, 6.48040755440),
    (0.00000002491, 2.97226347939, 453.94615868080),
    (0.00000002744, 1.93313970916, 73.18525127440),
    (0.00000002935, 4.59394106280, 167.08930495290),
    (0.00000003007, 1.38745560615, 365.00115658670),
    (0.00000003053, 1.91792962252, 561.18353448360),
    (0.00000002496, 5.45540866674, 66.18357885820),
    (0.00000002622, 1.46324659292, 33.13710079170),
    (0.00000003203, 4.01683757076, 555.55446019110),
    (0.00000002317, 1.13727677715, 43.24084506850),
    (0.00000002341, 5.87635018071, 228.27694896500),
    (0.00000002841, 3.60234459541, 42.58645376270),
    (0.00000002858, 1.53714262537, 353.30106501700),
    (0.00000002484, 3.85791009894, 104.00779795530),
    (0.00000002903, 5.21967656512, 73.40900044360),
    (0.00000002760, 1.21343315367, 32.24332891440),
    (0.00000002269, 3.31411391807, 4.14460158420),
    (0.00000002241, 2.65636547591, 70.11573212130),
    (0.00000002246, 4.08175081363, 123.53964334370),
    (0.00000002583, 2.38305971478, 100.64509366380),
    (0.00000002761, 5.71758409791, 43.28902917830),
    (0.00000002827, 6.16734582851, 101.86893394120),
    (0.00000002838, 0.54888495490, 20.49505323490),
    (0.00000002145, 4.04195315408, 47.06112374700),
    (0.00000002810, 1.90169260186, 273.10284047830),
    (0.00000002922, 2.79808700183, 418.26080359780),
    (0.00000002070, 5.50402718290, 47.69426319340),
    (0.00000002071, 2.01973573060, 316.39186965660),
    (0.00000002520, 3.12740527423, 905.88657979150),
    (0.00000002170, 4.46196560050, 2.70831298570),
    (0.00000002399, 3.78849518316, 75.58474771940),
    (0.00000002746, 4.82558024832, 6.85291456990),
    (0.00000002717, 2.33108458294, 404.61866493280),
    (0.00000002416, 4.11932546205, 332.80601178210),
    (0.00000001974, 5.79881978458, 11.15757484850),
    (0.00000001967, 5.43918682709, 199.28444975750),
    (0.00000002282, 2.79530897096, 22.63391724900),
    (0.00000001910, 0.27727117649, 69.15252427480),
    (0.00000002471, 3.51033894778, 8.59801970910),
    (0.00000001904, 3.45282024423, 472.17484191470),
    (0.00000002606, 0.43601023323, 439.78275515400),
    (0.00000002663, 5.43112910549, 3265.83082813250),
    (0.00000002058, 1.69362390174, 65.87476231750),
    (0.00000002258, 5.32927779367, 908.33426034630),
    (0.00000001873, 5.55399805910, 175.16605980020),
    (0.00000002222, 0.96973865202, 39.09624348430),
    (0.00000002121, 2.00302088316, 106.01353552540),
    (0.00000002010, 1.49945418027, 29.22619938800),
    (0.00000002222, 4.36573603431, 468.24268865160),
    (0.00000002055, 0.05798973044, 205.22234059070),
    (0.00000002086, 0.44287700052, 10.29494073850),
    (0.00000001770, 4.32048805830, 0.45757438700),
    (0.00000002112, 5.78682409103, 486.40193591630),
    (0.00000001909, 0.82888506421, 254.94359321360),
    (0.00000001973, 6.05826379648, 78.40493528970),
    (0.00000001908, 5.55892482384, 15.49911838880),
    (0.00000001888, 6.20874408008, 198.32124191100),
    (0.00000002092, 2.55561831566, 49.50880430180),
    (0.00000001775, 6.17741514589, 258.87574647670),
    (0.00000002146, 1.40508118810, 526.72201967800),
    (0.00000001800, 0.04238718337, 334.29048449040),
    (0.00000001738, 1.99152421966, 77.06922042770),
    (0.00000001641, 3.36410541913, 118.02244363580),
    (0.00000002084, 5.21275540105, 134.06407874580),
    (0.00000001861, 2.97480744198, 178.78939652260),
    (0.00000001750, 2.01731567093, 142.66209845490),
    (0.00000001600, 1.60963172329, 40.16002506730),
    (0.00000001668, 1.53361997245, 0.83008140250),
    (0.00000001769, 4.72689497119, 32.71640966640),
    (0.00000001782, 2.60469159465, 166.82867252200),
    (0.00000001765, 5.57583636983, 522.57741809380),
    (0.00000001877, 1.09044005603, 274.06604832480),
    (0.00000001544, 1.91798419140, 303.86169668440),
    (0.00000001532, 3.44973397383, 124.50285119020),
    (0.00000001658, 5.23946791059, 233.90602325750),
    (0.00000001743, 2.32369273283, 290.21955801940),
    (0.00000001528, 0.62020771152, 1033.35837639830),
    (0.00000001522, 6.11272567668, 165.60483224460),
    (0.00000001496, 2.02190170195, 150.08446199640),
    (0.00000001490, 3.30997217921, 820.05928096030),
    (0.00000001398, 3.41567259878, 4.99593484610),
    (0.00000001886, 6.25585539882, 162.89651925890),
    (0.00000001388, 0.62745508416, 448.68959140380),
    (0.00000001918, 0.91483173263, 1819.63746610920),
    (0.00000001682, 2.11545135265, 189.72322220190),
    (0.00000001711, 2.55731536599, 1108.13997496560),
    (0.00000001598, 0.89607036108, 115.88357962170),
    (0.00000001477, 0.22838214106, 370.93904741990),
    (0.00000001727, 1.54005322759, 401.64971951620),
    (0.00000001432, 3.73381952953, 8.90683624980),
    (0.00000001338, 0.19338311739, 81.89514556810),
    (0.00000001618, 6.02595306259, 31.23193695810),
    (0.00000001452, 0.11827434627, 72.77586099720),
    (0.00000001626, 4.26332651029, 369.45457471160),
    (0.00000001284, 3.18389639039, 362.86229257260),
    (0.00000001755, 5.57436830525, 344.96367773880),
    (0.00000001451, 4.42615381750, 189.18070548070),
    (0.00000001294, 2.77775613125, 63.62402371880),
    (0.00000001712, 2.16785817753, 536.80451209540),
    (0.00000001266, 2.78408709208, 55.77101804070),
    (0.00000001700, 2.49908604932, 441.26722786230),
    (0.00000001645, 2.41257585783, 10.08249241740),
    (0.00000001666, 5.00664377609, 79.51690098250),
    (0.00000001674, 0.00394784675, 491.55792945680),
    (0.00000001334, 5.62972572008, 129.91947716160),
    (0.00000001328, 0.25606135840, 114.94162363460),
    (0.00000001176, 1.63208422172, 84.18276742850),
    (0.00000001177, 4.10449248614, 103.35340664950),
    (0.00000001384, 5.73004529870, 89.33876096900),
    (0.00000001287, 0.99537181009, 14.66903698630),
    (0.00000001171, 5.98078310685, 57.14361616440),
    (0.00000001126, 3.39586759408, 375.39246554480),
    (0.00000001406, 5.18477940039, 113.87784205160),
    (0.00000001397, 1.49751443233, 14.22709400160),
    (0.00000001206, 3.60301196272, 480.77286162380),
    (0.00000001113, 4.80418427391, 9.44935297100),
    (0.00000001434, 1.57158177893, 419.74527630610),
    (0.00000001473, 1.03881736383, 1215.16490244730),
    (0.00000001311, 2.99704179684, 458.84151979040),
    (0.00000001453, 6.10676427884, 64.69910614990),
    (0.00000001070, 3.16542344402, 54.33472944220),
    (0.00000001389, 2.78512263875, 26.02355379090),
    (0.00000001203, 0.20627563214, 0.56944897160),
    (0.00000001343, 5.58004577468, 95.22846769240),
    (0.00000001062, 2.40616687148, 154.97982310600),
    (0.00000001399, 1.66776602336, 240.38643081190),
    (0.00000001036, 5.53891715915, 403.02231763990),
    (0.00000001269, 2.37684527290, 37.87240320690),
    (0.00000001197, 4.87553746725, 1044.40407666220),
    (0.00000001009, 2.74619462960, 80.41067285980),
    (0.00000001330, 0.99603813295, 483.22054217860),
    (0.00000001348, 0.58829539202, 476.43131808350),
    (0.00000000989, 3.31666847329, 18.91000679010),
    (0.00000001054, 2.85972567059, 616.32141307790),
    (0.00000001276, 4.72938141859, 691.10301164520),
    (0.00000001219, 3.62909689220, 106.27416795630),
    (0.00000001269, 1.53301050628, 280.96714700450),
    (0.00000000968, 2.73688433893, 218.92816973050),
    (0.00000001330, 5.69234088687, 694.07195706180),
    (0.00000001121, 2.80542439790, 148.59998928810),
    (0.00000000980, 6.04026702553, 5.46901559810),
    (0.00000001235, 0.61136787453, 237.67811782620),
    (0.00000001161, 5.32209024820, 369.08206769610),
    (0.00000000944, 1.14261861393, 384.05992122310),
    (0.00000001017, 2.49896409345, 147.11551657980),
    (0.00000001082, 2.46236323548, 326.86812094890),
    (0.00000001037, 5.92126063748, 4.82592514040),
    (0.00000001232, 5.83725190224, 63.84777288800),
    (0.00000000914, 0.36627060914, 10.93382567930),
    (0.00000001165, 5.32140830393, 308.31511480930),
    (0.00000000952, 4.78982033367, 93.90405367850),
    (0.00000000993, 3.39918521663, 10.78506783300),
    (0.00000001206, 3.64530500530, 699.70103135430),
    (0.00000000893, 2.97140509591, 248.46318565920),
    (0.00000000883, 2.85605198817, 15.19030184810),
    (0.00000000875, 3.43925709280, 3.08082000120),
    (0.00000001103, 4.80576195766, 6133.51265285680),
    (0.00000001178, 6.01576659565, 377.15882254340),
    (0.00000000974, 2.51206761828, 121.84272231430),
    (0.00000000865, 5.68958102479, 141.69889060840),
    (0.00000000974, 3.15729174941, 215.43795945210),
    (0.00000000847, 0.84854843713, 2043.98226181110),
    (0.00000000961, 0.22181374419, 0.91502373670),
    (0.00000001167, 2.37544946421, 33.94024994380),
    (0.00000001013, 3.43778868786, 36.90919536040),
    (0.00000000838, 1.63355479706, 2.33580597020),
    (0.00000001113, 2.50989694970, 405.99126305650),
    (0.00000000987, 1.14030030863, 82.20396210880),
    (0.00000001060, 1.70915765427, 438.29828244570),
    (0.00000000829, 2.97491446672, 62.77269045690),
    (0.00000000991, 4.44869793177, 406.10313764110),
    (0.00000000952, 6.13897716036, 184.98791978670),
    (0.00000001033, 4.19932839584, 141.48644228730),
    (0.00000001029, 5.13205530996, 157.26744496640),
    (0.00000000805, 3.11000318272, 93.79217909390),
    (0.00000000865, 4.44578048207, 295.19424100610),
    (0.00000000921, 4.88190545687, 12.00890811040),
    (0.00000000949, 5.99910796869, 606.76018552230),
    (0.00000000991, 1.68012021428, 40.58071619260),
    (0.00000000854, 0.37823682862, 217.23124870110),
    (0.00000000883, 2.36224385140, 3.77209456870),
    (0.00000001016, 3.90745585959, 194.28851491140),
    (0.00000000807, 5.93051451738, 302.09533968580),
    (0.00000000879, 0.52695940866, 1057.89745748090),
    (0.00000001009, 1.19621149495, 490.07345674850),
    (0.00000000801, 4.96724351781, 661.09491496450),
    (0.00000000843, 0.97496000705, 73.88782669000),
    (0.00000001028, 2.65189503651, 477.91579079180),
    (0.00000000846, 3.36343733960, 40.84134862350),
    (0.00000000772, 4.93551925711, 425.11371816770),
    (0.00000000781, 0.59382881638, 97.67614824720),
    (0.00000000770, 4.25621058806, 488.84961647110),
    (0.00000000935, 1.24971148781, 624.91943278700),
    (0.00000000984, 4.44298060183, 171.65459766240),
    (0.00000000806, 0.09410536829, 440.68227252570),
    (0.00000000769, 4.09296452529, 140.65636088480),
    (0.00000000802, 0.78515729603, 11.84884941600),
    (0.00000001007, 4.06909438635, 76.15419669100),
    (0.00000000935, 0.03808890956, 156.15547927360),
    (0.00000000712, 5.35549696452, 610.69233878540),
    (0.00000000911, 4.70177653335, 81.68269724700),
    (0.00000000926, 3.09765550633, 833.55266177900),
    (0.00000000812, 3.54377377085, 149.40313844020),
    (0.00000000801, 5.48034970408, 21.97952594320),
    (0.00000000900, 4.21739347020, 778.41478318470),
    (0.00000000689, 2.56862945159, 109.31254934210),
    (0.00000000685, 3.19965828980, 31.65262808340),
    (0.00000000952, 4.82579978820, 1744.85586754190),
    (0.00000000724, 2.16878848875, 1171.87587326900),
    (0.00000000897, 3.94746491183, 75.67537044460),
    (0.00000000739, 5.45802693622, 252.65597135320),
    (0.00000000821, 4.26046087515, 1246.65747183630),
    (0.00000000663, 5.83767831921, 86.63044798330),
    (0.00000000664, 1.72432848951, 216.48048917570),
    (0.00000000721, 3.98089320988, 902.70518605380),
    (0.00000000663, 4.98388191647, 958.57677783100),
    (0.00000000750, 2.66119349235, 363.51668387840),
    (0.00000000828, 3.62849315181, 14.81779483260),
    (0.00000000663, 3.23521229496, 207.88246946660),
    (0.00000000681, 3.29667467046, 25.06034594440),
    (0.00000000887, 4.81199147907, 155.50108796780),
    (0.00000000646, 2.65129054432, 685.47393735270),
    (0.00000000808, 5.68764955594, 280.00393915800),
    (0.00000000619, 1.32296886424, 193.65537546500),
    (0.00000000621, 2.57837200005, 703.63318461740),
    (0.00000000854, 3.63173686962, 411.62033734900),
    (0.00000000728, 1.05845783695, 916.93228005540),
    (0.00000000733, 0.75817076935, 44.09217833040),
    (0.00000000629, 1.52747752455, 397.39324334740),
    (0.00000000599, 5.30671888409, 180.16199464630),
    (0.00000000615, 5.68908944293, 25.27279426550),
    (0.00000000709, 0.64922689354, 14.55716240170),
    (0.00000000729, 4.79389069212, 479.40026350010),
    (0.00000000667, 1.98320895029, 37.61177077600),
    (0.00000000586, 1.51157853976, 668.20846196530),
    (0.00000000639, 1.69085181319, 262.47783133970),
    (0.00000000616, 4.62035066985, 12.26954054130),
    (0.00000000687, 2.24368916079, 228.79821382680),
    (0.00000000599, 2.08317681783, 149.30256470370),
    (0.00000000597, 3.14660293947, 137.55428902420),
    (0.00000000581, 2.69049614736, 823.99143422340),
    (0.00000000709, 4.38514100216, 184.09414790940),
    (0.00000000671, 3.46925958949, 105.38039607900),
    (0.00000000619, 2.91325544152, 236.87496867410),
    (0.00000000558, 2.96177194880, 34.20088237470),
    (0.00000000648, 5.56457931302, 140.96517742550),
    (0.00000000581, 0.55427680962, 331.20966448920),
    (0.00000000585, 0.15548306049, 232.42155054920),
    (0.00000000548, 3.57525860446, 497.44763618020),
    (0.00000000574, 5.60908001848, 118.87377689770),
    (0.00000000702, 1.74156189506, 149.04193227280),
    (0.00000000543, 0.49890445043, 133.10087089930),
    (0.00000000716, 3.04149734724, 131.92521473170),
    (0.00000000544, 6.22369103738, 149.61138124440),
    (0.00000000539, 0.74276113752, 911.30320576290),
    (0.00000000614, 5.83710659138, 181.05576652360),
    (0.00000000601, 0.30768922616, 407.58761034940),
    (0.00000000635, 4.03476459045, 136.06981631590),
    (0.00000000526, 5.42874995984, 450.97721326420),
    (0.00000000547, 3.07676037032, 204.70107572890),
    (0.00000000622, 3.08666523105, 268.43697403230),
    (0.00000000537, 4.25467814241, 217.44369702220),
    (0.00000000566, 4.84686444604, 842.15068148810),
    (0.00000000636, 2.57425168783, 621.73803904930),
    (0.00000000623, 5.84341335807, 52.80207262410),
    (0.00000000544, 3.62983006500, 149.51501302480),
    (0.00000000578, 0.34796271917, 139.48070471720),
    (0.00000000537, 5.99181083831, 246.97871295090),
    (0.00000000674, 2.57972741298, 602.98809095360),
    (0.00000000539, 6.19662961610, 696.51963761660),
    (0.00000000516, 2.19916575703, 458.09076026500),
    (0.00000000632, 5.26658553640, 67.07735073550),
    (0.00000000581, 0.05320320337, 95.93104310800),
    (0.00000000504, 6.24600928623, 149.72325582900),
    (0.00000000638, 6.23121553223, 10063.72234907640),
    (0.00000000528, 0.20662780149, 310.17209453310),
    (0.00000000537, 2.96207822442, 73.13706716460),
    (0.00000000508, 5.29969144068, 335.77495719870),
    (0.00000000487, 2.83772541949, 143.93412284210),
    (0.00000000537, 3.36808372143, 252.08652238160),
    (0.00000000632, 5.88494938125, 920.86443331850),
    (0.00000000523, 6.13183488285, 1589.07289528380),
    (0.00000000579, 0.04597861846, 563.63121503840),
    (0.00000000613, 0.34938781762, 343.47920503050),
    (0.00000000495, 2.89212499810, 61.44827644300),
    (0.00000000623, 0.71740350315, 513.07988101300),
    (0.00000000498, 2.53375871592, 41.75637236020),
    (0.00000000564, 2.01612524784, 449.28029223480),
    (0.00000000480, 0.10535023009, 69.67378913660),
    (0.00000000494, 3.25187012728, 428.08266358430),
    (0.00000000536, 5.81149025999, 282.66406803390),
    (0.00000000468, 0.89483830828, 541.53981451060),
    (0.00000000533, 2.44239677121, 393.46109008430),
    (0.00000000589, 6.24067076234, 29.79564835960),
    (0.00000000465, 0.25006743710, 57.25549074900),
    (0.00000000622, 3.89339038121, 416.77633088950),
    (0.00000000519, 2.72375973888, 469.13646052890),
    (0.00000000498, 1.76422801185, 380.38840039090),
    (0.00000000596, 0.83642843095, 98.35747180340),
    (0.00000000459, 0.39052216206, 197.79997704920),
    (0.00000000574, 2.86366933069, 170.76082578510),
    (0.00000000518, 3.38058345605, 535.91074021810),
    (0.00000000564, 1.20395155832, 832.58945393250),
    (0.00000000556, 4.39974034374, 196.62432088160),
    (0.00000000537, 3.93637064940, 460.53844081980),
    (0.00000000482, 2.41562148830, 827.92358748650),
    (0.00000000578, 2.39644032176, 1670.07426897460),
    (0.00000000475, 4.19223519775, 271.40591944890),
    (0.00000000452, 3.99146251480, 135.33610313300),
    (0.00000000514, 6.11377193423, 1894.41906467650),
    (0.00000000531, 3.45607724228, 450.45594840240),
    (0.00000000492, 5.87591888758, 170.17012495410),
    (0.00000000588, 2.66953705406, 310.97524368520),
    (0.00000000564, 1.04491117370, 446.31134681820),
    (0.00000000440, 5.85084571537, 224.23292111730),
    (0.00000000441, 2.19799439287, 119.39504175950),
    (0.00000000549, 6.05651523611, 76.37794586020),
    (0.00000000573, 2.29898526750, 122.47586176070),
    (0.00000000473, 4.61187869812, 291.26208774300),
    (0.00000000553, 4.90464199013, 463.50738623640),
    (0.00000000599, 1.48666209087, 149.82382956550),
    (0.00000000499, 3.72896978991, 853.19638175200),
    (0.00000000440, 5.05024690419, 79.44746501330),
    (0.00000000558, 0.42332722744, 283.62727588040),
    (0.00000000458, 4.49655973916, 754.83890994860),
    (0.00000000449, 1.32861330901, 308.68762182480),
    (0.00000000565, 0.45628024105, 241.87090352020),
    (0.00000000510, 3.70202346104, 452.46168597250),
    (0.00000000404, 0.12335821240, 1097.09427470170),
    (0.00000000409, 4.02092464698, 735.87651353180),
    (0.00000000464, 3.82915608692, 1094.54602041040),
    (0.00000000439, 2.72266354653, 376.19561469690),
    (0.00000000478, 0.23380952322, 1182.92157353290),
    (0.00000000412, 1.21971515436, 419.48464387520),
    (0.00000000546, 0.22296640745, 829.62050851590),
    (0.00000000510, 2.69499052512, 412.58354519550),
    (0.00000000409, 2.51935747849, 409.07208305770),
    (0.00000000451, 0.56137272347, 758.77106321170),
    (0.00000000399, 0.86037315330, 337.80194662820),
    (0.00000000393, 0.40202463200, 107.49800823370),
    (0.00000000494, 5.02745190154, 619.29035849450),
    (0.00000000404, 0.08539758465, 18.96239641680),
    (0.00000000504, 4.18251931021, 449.49274055590),
    (0.00000000406, 3.80082989682, 34.53095077480),
    (0.00000000545, 2.80919248176, 514.56435372130),
    (0.00000000390, 1.65941826256, 447.20511869550),
    (0.00000000448, 2.81540452771, 400.16524680790),
    (0.00000000405, 4.86073222353, 1404.08497549710),
    (0.00000000476, 1.61050626902, 54.28654533240),
    (0.00000000406, 1.29798079034, 226.79247625670),
    (0.00000000526, 5.35780726572, 838.21852822500),
    (0.00000000403, 2.75405589772, 285.11174858870),
    (0.00000000381, 4.97702366598, 309.27832265580),
    (0.00000000448, 1.37926537411, 745.27768239300),
    (0.00000000419, 0.90546724862, 451.72797278960),
    (0.00000000450, 1.92391706975, 474.94684537520),
    (0.00000000474, 5.54351717465, 494.26624244250),
    (0.00000000460, 5.09575399931, 289.56516671360),
    (0.00000000455, 3.14755087330, 168.57377766120),
    (0.00000000372, 4.87645271422, 116.53797092750),
    (0.00000000479, 1.08512503555, 154.29849954980),
    (0.00000000374, 0.16389070181, 1190.78588005910),
    (0.00000000422, 3.51871257208, 706.81457835510),
    (0.00000000354, 4.06405413226, 124.29040286910),
    (0.00000000494, 4.57924296149, 167.72244439930),
    (0.00000000357, 5.78050145791, 1265.56747862640),
    (0.00000000402, 2.67652703260, 464.47059408290),
    (0.00000000370, 2.21677703856, 232.04904353370),
    (0.00000000462, 4.10424305270, 27.72047482030),
    (0.00000000364, 3.07518732480, 442.63982598600),
    (0.00000000403, 1.69214233165, 90.28071695610),
    (0.00000000348, 1.16647947937, 357.44566660120),
    (0.00000000443, 1.32306861852, 298.23262239190),
    (0.00000000386, 4.34980428548, 227.52618943960),
    (0.00000000337, 5.92030047826, 445.34813897170),
    (0.00000000356, 2.38824200660, 511.59540830470),
    (0.00000000357, 3.19265737844, 21.19762865050),
    (0.00000000406, 3.72223708907, 3116.26763099790),
    (0.00000000341, 3.05116722794, 15.78100267910),
    (0.00000000379, 4.72472516443, 30.59879751170),
    (0.00000000400, 0.71868453904, 836.52160719560),
    (0.00000000370, 0.17259001853, 6531.66165626500),
    (0.00000000456, 0.83408547295, 674.80074410430),
    (0.00000000376, 5.91068811321, 1617.38407093510),
    (0.00000000392, 1.90856045571, 25863.55834587229),
    (0.00000000333, 4.77074940789, 76.78733613740),
    (0.00000000332, 0.85699402720, 749.20983565610),
    (0.00000000321, 3.88221470645, 38.60611638980),
    (0.00000000321, 2.59404134515, 1300.99220127850),
    (0.00000000438, 2.60178805278, 224.45667028650),
    (0.00000000371, 3.73501205989, 328.24071907260),
    (0.00000000357, 0.03656571669, 148.81243760920),
    (0.00000000389, 3.06990362181, 1012.91150727320),
    (0.00000000392, 3.14428599675, 125.18417474640),
    (0.00000000326, 2.23565995627, 89.59939339990),
    (0.00000000314, 4.56810921721, 1681.11996923850),
    (0.00000000333, 4.37613329736, 147.96684984170),
    (0.00000000326, 4.15448016748, 21.14944454070),
    (0.00000000371, 4.09066371754, 239.16259053450),
    (0.00000000372, 1.12230345314, 321.76031151820),
    (0.00000000305, 6.12924444546, 19.97378837310),
    (0.00000000407, 3.65906570714, 679.25416222920),
    (0.00000000406, 3.58469900333, 26013.12154300690),
    (0.00000000310, 3.92339533494, 229.08009811710),
    (0.00000000321, 1.35118535306, 172.45774681450),
    (0.00000000332, 3.54513021513, 288.73508531110),
    (0.00000000312, 2.87878773413, 806.72595883600),
    (0.00000000372, 1.99953045718, 192.80404220310),
    (0.00000000302, 0.01867543539, 501.37978944330),
    (0.00000000299, 3.96468960950, 20277.00789528740),
    (0.00000000308, 2.66235795286, 248.72381809010),
    (0.00000000298, 3.52867456736, 21.45826108140),
    (0.00000000370, 3.51061046963, 91.45637312370),
    (0.00000000297, 0.79872983355, 742.99006053260),
    (0.00000000414, 4.81163687199, 589.49471013490),
    (0.00000000302, 5.26079338050, 27.56041612590),
    (0.00000000314, 3.14643487607, 361.37781986430),
    (0.00000000356, 4.63707521448, 442.75170057060),
    (0.00000000357, 3.44793069844, 44.61344319220),
    (0.00000000370, 4.25032151516, 304.23420369990),
    (0.00000000366, 5.43115395433, 625.99451521810),
    (0.00000000365, 0.30454498410, 6283.07584999140),
    (0.00000000322, 2.32892248876, 229.45260513260),
    (0.00000000369, 3.28573365074, 104.52906281710),
    (0.00000000327, 2.98588869318, 348.84764689210),
    (0.00000000315, 3.66842071994, 230.93707784090),
    (0.00000000356, 0.90433599977, 29.74746424980),
    (0.00000000384, 0.91820739126, 549.72844394250),
    (0.00000000317, 3.86462587284, 639.89728631400),
    (0.00000000333, 4.95319798125, 881.50755740330),
    (0.00000000285, 4.09883967296, 904.18965876210),
    (0.00000000338, 5.65177488491, 195.77298761970),
    (0.00000000365, 0.57418860616, 285.63301345050),
    (0.00000000363, 0.98999016221, 839.70300093330),
    (0.00000000330, 2.26308969695, 49.17873590170),
    (0.00000000335, 2.25619157817, 272.58157561650),
    (0.00000000376, 5.87496858487, 268.95823889410),
    (0.00000000362, 4.94491380965, 572.22923474750),
    (0.00000000320, 5.58342880588, 459.36278465220),
    (0.00000000299, 2.86286938521, 883.79517926370),
    (0.00000000286, 2.49409963193, 156.04360468900),
    (0.00000000272, 3.62976505444, 754.03576079650),
    (0.00000000349, 2.34615857088, 6069.77675455340),
    (0.00000000279, 4.04872155075, 180.79513409270),
    (0.00000000328, 1.21350330743, 148.19059901090),
    (0.00000000315, 0.74270298817, 320.27583880990),
    (0.00000000324, 5.54296698387, 1507.17774971570),
    (0.00000000266, 4.36134021576, 1310.39337013970),
    (0.00000000262, 5.84934968714, 450.17406411210),
    (0.00000000280, 5.05848320657, 102.52332524700),
    (0.00000000347, 4.70068639620, 282.14280317210),
    (0.00000000342, 5.47365149093, 163.57784281510),
    (0.00000000364, 3.29301824378, 378.90392768260),
    (0.00000000330, 4.63426494882, 341.99473232220),
    (0.00000000259, 2.43682741156, 170.01006625970),
    (0.00000000336, 3.79029047358, 9999.98645077300),
    (0.00000000284, 2.52583672467, 266.10116806210),
    (0.00000000281, 3.93593342516, 194.17664032680),
    (0.00000000297, 0.18595848541, 491.81856188770),
    (0.00000000290, 4.49575150721, 151.85081899500),
    (0.00000000284, 1.59495665161, 336.83873878170),
    (0.00000000255, 5.85817353877, 229.34073054800),
    (0.00000000260, 5.92834225312, 455.06942522170),
    (0.00000000274, 0.53977064975, 380.23964254460),
    (0.00000000259, 3.15728797958, 454.74930783290),
    (0.00000000303, 0.17851964142, 384.58118608490),
    (0.00000000285, 1.29732672572, 25.12978191360),
    (0.00000000273, 4.18776699292, 177.30492381430),
    (0.00000000326, 1.68159391466, 161.72086309130),
    (0.00000000321, 2.36931686576, 2274.54683263650),
    (0.00000000241, 3.57660492473, 150.31395666000),
    (0.00000000273, 3.78780099400, 380.01589337540),
    (0.00000000265, 3.02540120552, 454.79749194270),
    (0.00000000265, 6.06087280189, 455.02124111190),
    (0.00000000279, 3.82392760479, 31.54075349880),
    (0.00000000273, 2.64820862667, 838.00607990390),
    (0.00000000238, 5.17487170793, 263.02034806090),
    (0.00000000299, 3.94906046599, 531.97858695500),
    (0.00000000317, 2.28289083599, 44.07092647100),
    (0.00000000250, 1.35950829789, 304.12232911530),
    (0.00000000312, 2.73327875294, 442.37919355510),
    (0.00000000314, 3.86400459047, 734.45573129830),
    (0.00000000251, 0.15148137746, 221.16340196420),
    (0.00000000272, 5.71864670101, 164.54105066160),
    (0.00000000305, 4.96642198943, 1140.38330388000),
    (0.00000000282, 5.46073788901, 550.13783421970),
    (0.00000000273, 5.68721459468, 92.41958097020),
    (0.00000000256, 0.88787970870, 418.52143602870),
    (0.00000000229, 5.02021405557, 144.89733068860),
    (0.00000000231, 5.70236752870, 132.88842257820),
    (0.00000000218, 2.05623736180, 303.05854753230),
    (0.00000000300, 1.76109447754, 371.52974825090),
    (0.00000000216, 2.97122807313, 176.65053250850),
    (0.00000000224, 3.12798198868, 188.92007304980),
    (0.00000000212, 1.30757526083, 74.14845912090),
    (0.00000000238, 4.65119406609, 385.75684225250),
    (0.00000000216, 0.07086910120, 893.35640681930),
    (0.00000000262, 5.78959872639, 635.96513305090),
    (0.00000000250, 4.47327859711, 551.10104206620),
    (0.00000000222, 1.64692618955, 76.42612997000),
    (0.00000000254, 2.61838408005, 525.23754696970),
    (0.00000000284, 4.13290731223, 544.50875992720),
    (0.00000000262, 2.82476092056, 971.10695080320),
    (0.00000000266, 4.12467258610, 375.67434983510),
    (0.00000000212, 3.61675003296, 75.41473801370),
    (0.00000000253, 3.14224867483, 270.18207917150),
    (0.00000000250, 4.32883971376, 346.44815044710),
    (0.00000000273, 1.95676918609, 402.21916848780),
    (0.00000000259, 1.96371242284, 968.13800538660),
    (0.00000000238, 1.29663338057, 421.18156490460),
    (0.00000000243, 5.94961177434, 117.36805233000),
    (0.00000000241, 4.70849619029, 406.95447090300),
    (0.00000000216, 3.31232425021, 190.66517818900),
    (0.00000000201, 1.23733749784, 799.61241183520),
    (0.00000000223, 0.98087204684, 627.36711334180),
    (0.00000000226, 1.66139333004, 1366.21257229020),
    (0.00000000205, 0.33839683950, 143.34342201110),
    (0.00000000240, 0.71559872262, 525.75881183150),
    (0.00000000223, 2.57722930616, 981.63138620530),
    (0.00000000193, 4.48974066435, 172.19711438360),
    (0.00000000221, 2.88670838151, 238.90195810360),
    (0.00000000177, 3.87122035013, 389.68899551560),
    (0.00000000175, 5.85737374379, 170.71264167530),
    (0.00000000233, 0.63169996424, 980.66817835880),
    (0.00000000225, 4.81504648561, 88.27497938600),
    (0.00000000210, 2.49819501106, 128.43500445330),
    (0.00000000172, 0.91255921858, 210.85141488320),
    (0.00000000176, 3.85133296117, 605.95703637020),
    (0.00000000211, 1.72999855867, 10213.28554621100),
    (0.00000000170, 1.61405340100, 1512.80682400820),
    (0.00000000216, 1.54874566441, 1060.86640289750),
    (0.00000000194, 6.07381783144, 520.12973753900),
    (0.00000000170, 2.58526747515, 1515.77576942480),
    (0.00000000172, 1.45073604378, 995.64603188580),
    (0.00000000160, 4.20015913513, 433.71173787680),
    (0.00000000219, 1.63985385568, 630.33605875840),
    (0.00000000219, 1.96273394194, 313.68355667090),
    (0.00000000159, 3.62343846627, 73.97844941520),
    (0.00000000206, 0.83764718449, 104.83787935780),
    (0.00000000203, 0.68701289007, 1363.24362687360),
    (0.00000000158, 0.81666479221, 987.56927703850),
    (0.00000000172, 2.97938676702, 327.43756992050),
    (0.00000000147, 2.15517092627, 73.24894174920),
    (0.00000000156, 1.29643469200, 216.26804085460),
    (0.00000000153, 3.77492020946, 768.85355562910),
    (0.00000000147, 4.74903152642, 73.34530996880),
    (0.00000000198, 2.80749830888, 225.30800354840),
    (0.00000000179, 0.35410767087, 421.22974901440),
    (0.00000000204, 3.47423038287, 564.85505531580),
    (0.00000000172, 2.88420642820, 233.53351624200),
    (0.00000000195, 3.09114364733, 294.30046912880),
    (0.00000000181, 4.75684139861, 71.15826184490),
    (0.00000000160, 3.16134209902, 70.04629615210),
    (0.00000000155, 2.07144269719, 91.24392480260),
    (0.00000000154, 3.37462128317, 138.40562228610),
    (0.00000000192, 6.19629054455, 312.19908396260),
    (0.00000000162, 0.60896273267, 73.03649342810),
    (0.00000000172, 2.01712700688, 973.55463135800),
    (0.00000000145, 1.72582731815, 302.37722397610),
    (0.00000000170, 2.97437423989, 3191.04922956520),
    (0.00000000153, 0.11158566352, 138.62937145530),
    (0.00000000164, 5.37129563471, 457.35704708210),
    (0.00000000132, 3.15466226029, 523.47118997110),
    (0.00000000137, 2.88313323946, 765.88461021250),
    (0.00000000128, 1.75773421717, 77.70235987410),
    (0.00000000173, 5.03552846066, 415.29185818120),
    (0.00000000137, 4.77137510538, 73.45718455340),
    (0.00000000163, 0.99316178485, 94.42531854030),
    (0.00000000138, 4.68330115148, 517.16079212240),
    (0.00000000133, 2.95376828791, 75.15410558280),
    (0.00000000134, 1.35779558361, 249.94765836750),
    (0.00000000168, 4.73164542970, 108.72184851110),
    (0.00000000119, 1.48229220689, 237.41748539530),
    (0.00000000134, 1.52277177920, 154.67100656530),
    (0.00000000117, 5.48642273610, 437.64389113990),
    (0.00000000131, 5.76525548944, 75.43598987310),
    (0.00000000127, 2.38309227230, 208.84567731310),
    (0.00000000115, 4.38951350436, 343.21857259960),
    (0.00000000114, 4.48142283161, 224.86606056370),
    (0.00000000117, 5.37802827323, 293.70976829780),
    (0.00000000136, 2.80772094137, 374.49869366750),
)

L1 = (
    (75.02543121646, 0.00000000000, 0.00000000000),
    (0.00154458244, 5.24201658072, 74.78159856730),
    (0.00024456413, 1.71255705309, 1.48447270830),
    (0.00009257828, 0.42844639064, 11.04570026390),
    (0.00008265977, 1.50220035110, 63.73589830340),
    (0.00007841715, 1.31983607251, 149.56319713460),
    (0.00003899105, 0.46483574024, 3.93215326310),
    (0.00002283777, 4.17367533997, 76.26607127560),
    (0.00001926600, 0.53013080152, 2.96894541660),
    (0.00001232727, 1.58634458237, 70.84944530420),
    (0.00000791206, 5.43641224143, 3.18139373770),
    (0.00000766954, 1.99555409575, 73.29712585900),
    (0.00000481671, 2.98401996914, 85.82729883120),
    (0.00000449798, 4.13826237508, 138.51749687070),
    (0.00000445600, 3.72300400331, 224.34479570190),
    (0.00000426554, 4.73126059388, 71.81265315070),
    (0.00000347735, 2.45372261286, 9.56122755560),
    (0.00000353752, 2.58324496886, 148.07872442630),
    (0.00000317084, 5.57855232072, 52.69019803950),
    (0.00000179920, 5.68367730922, 12.53017297220),
    (0.00000171084, 3.00060075287, 78.71375183040),
    (0.00000205585, 2.36263144251, 2.44768055480),
    (0.00000158029, 2.90931969498, 0.96320784650),
    (0.00000189068, 4.20242881378, 56.62235130260),
    (0.00000154670, 5.59083925605, 4.45341812490),
    (0.00000183762, 0.28371004654, 151.04766984290),
    (0.00000143464, 2.59049246726, 62.25142559510),
    (0.00000151984, 2.94217326890, 77.75054398390),
    (0.00000153515, 4.65186885939, 35.16409022120),
    (0.00000121452, 4.14839204920, 127.47179660680),
    (0.00000115546, 3.73224603791, 65.22037101170),
    (0.00000102022, 4.18754517993, 145.63104387150),
    (0.00000101718, 6.03385875009, 0.11187458460),
    (0.00000088202, 3.99035787994, 18.15924726470),
    (0.00000087549, 6.15520787584, 202.25339517410),
    (0.00000080530, 2.64124743934, 22.09140052780),
    (0.00000072047, 6.04545933578, 70.32818044240),
    (0.00000068570, 4.05071895264, 77.96299230500),
    (0.00000059173, 3.70413919082, 67.66805156650),
    (0.00000047267, 3.54312460519, 351.81659230870),
    (0.00000042534, 5.72357370899, 5.41662597140),
    (0.00000044339, 5.90865821911, 7.11354700080),
    (0.00000035605, 3.29197259183, 8.07675484730),
    (0.00000035524, 3.32784616138, 71.60020482960),
    (0.00000036116, 5.89964278801, 33.67961751290),
    (0.00000030608, 5.46414592601, 160.60889739850),
    (0.00000031454, 5.62015632303, 984.60033162190),
    (0.00000038544, 4.91519003848, 222.86032299360),
    (0.00000034996, 5.08034112149, 38.13303563780),
    (0.00000030811, 5.49591403863, 59.80374504030),
    (0.00000028947, 4.51867390414, 84.34282612290),
    (0.00000026627, 5.54127301037, 131.40394986990),
    (0.00000029866, 1.65980844667, 447.79581952650),
    (0.00000029206, 1.14722640419, 462.02291352810),
    (0.00000025753, 4.99362028417, 137.03302416240),
    (0.00000025373, 5.73584678604, 380.12776796000),
    (0.00000021672, 2.80556379586, 69.36497259590),
    (0.00000026605, 6.14640604128, 299.12639426920),
    (0.00000022995, 2.24925345862, 111.43016149680),
    (0.00000019246, 3.55645739672, 54.17467074780),
    (0.00000021780, 0.93285892393, 213.29909543800),
    (0.00000019338, 1.86249384092, 108.46121608020),
    (0.00000016153, 3.10208165842, 14.97785352700),
    (0.00000013126, 1.95385539499, 87.31177153950),
    (0.00000013907, 1.54149045800, 340.77089204480),
    (0.00000013549, 4.38455126720, 5.93789083320),
    (0.00000013102, 5.88301410143, 6.21977512350),
    (0.00000011810, 0.32615567587, 35.42472265210),
    (0.00000010980, 1.69230280951, 45.57665103870),
    (0.00000012351, 0.32823896833, 51.20572533120),
    (0.00000010906, 5.97068444790, 265.98929347750),
    (0.00000011446, 3.37831545858, 72.33391801250),
    (0.00000012013, 3.60395709253, 269.92144674060),
    (0.00000011662, 1.74504271366, 79.23501669220),
    (0.00000013777, 2.69028726334, 225.82926841020),
    (0.00000012006, 5.34430562395, 152.53214255120),
    (0.00000009866, 5.50316093605, 153.49535039770),
    (0.00000010436, 4.16875643286, 24.37902238820),
    (0.00000010632, 3.06875158069, 284.14854074220),
    (0.00000009613, 0.49590148788, 209.36694217490),
    (0.00000009283, 3.54479191952, 41.64449777560),
    (0.00000009536, 5.60054956443, 82.85835341460),
    (0.00000009740, 1.01087744586, 68.84370773410),
    (0.00000009187, 4.49472579228, 20.60692781950),
    (0.00000010159, 3.51765739489, 529.69096509460),
    (0.00000008612, 3.88869873588, 60.76695288680),
    (0.00000010030, 4.64790204580, 77.22927912210),
    (0.00000008689, 1.96813580258, 195.13984817330),
    (0.00000008370, 4.40914764204, 134.58534360760),
    (0.00000009273, 3.93291227900, 39.61750834610),
    (0.00000007784, 5.35626068469, 75.74480641380),
    (0.00000007724, 5.77176047568, 73.81839072080),
    (0.00000007683, 4.44252070929, 14.01464568050),
    (0.00000008355, 2.44425910430, 146.59425171800),
    (0.00000007954, 5.73093878181, 184.72728735580),
    (0.00000007465, 2.18972405572, 145.10977900970),
    (0.00000006430, 0.84582374839, 32.19514480460),
    (0.00000006257, 2.17085130003, 74.89347315190),
    (0.00000007911, 0.17275924476, 120.35824960600),
    (0.00000007036, 4.12047266896, 191.20769491020),
    (0.00000006860, 2.13462553365, 116.42609634290),
    (0.00000005191, 3.11155355454, 106.97674337190),
    (0.00000004798, 2.25093144226, 46.20979048510),
    (0.00000004566, 3.45427648666, 0.75075952540),
    (0.00000004401, 3.94058045671, 6.59228213900),
    (0.00000004214, 5.17805765625, 144.14657116320),
    (0.00000004409, 0.24427052932, 92.94084583200),
    (0.00000004866, 1.15344187054, 112.91463420510),
    (0.00000004744, 5.18229292013, 81.00137369080),
    (0.00000004332, 2.52429167546, 99.16062095550),
    (0.00000003876, 2.78430217652, 565.11568774670),
    (0.00000003801, 0.75133837939, 58.10682401090),
    (0.00000004146, 5.84943984597, 221.37585028530),
    (0.00000003885, 4.95626104286, 125.98732389850),
    (0.00000003815, 3.23004401930, 479.28838891550),
    (0.00000003679, 5.28098232097, 66.91729204110),
    (0.00000003479, 2.95514470947, 74.66972398270),
    (0.00000003514, 4.90090391308, 28.31117565130),
    (0.00000004515, 4.15474629145, 344.70304530790),
    (0.00000004036, 2.28903172191, 109.94568878850),
    (0.00000004266, 2.68534591099, 7.86430652620),
    (0.00000003428, 0.02846652682, 140.00196957900),
    (0.00000003644, 5.32002093810, 408.43894361130),
    (0.00000003252, 1.44975192429, 128.95626931510),
    (0.00000004143, 1.89070487241, 277.03499374140),
    (0.00000003177, 0.04197149544, 220.41264243880),
    (0.00000003901, 6.25926496244, 0.89377187730),
    (0.00000003787, 0.02516903921, 152.74459087230),
    (0.00000003200, 0.52009458683, 2.28762186040),
    (0.00000002995, 1.94615440691, 80.19822453870),
    (0.00000004029, 5.24603808726, 96.87299909510),
    (0.00000003302, 4.81033551060, 422.66603761290),
    (0.00000003189, 6.26156603400, 456.39383923560),
    (0.00000002804, 1.35626949052, 404.50679034820),
    (0.00000002970, 0.54327361056, 159.12442469020),
    (0.00000003465, 5.88337990735, 16.67477455640),
    (0.00000003518, 4.99649404130, 36.64856292950),
    (0.00000003081, 2.82772472086, 453.42489381900),
    (0.00000003320, 1.56223495893, 23.57587323610),
    (0.00000002573, 6.19617997586, 135.54855145410),
    (0.00000002547, 5.19937103778, 173.94221952280),
    (0.00000002534, 1.85452635674, 490.33408917940),
    (0.00000003106, 6.07067928601, 142.44965013380),
    (0.00000003302, 1.02846689671, 297.64192156090),
    (0.00000002429, 1.33640100979, 211.81462272970),
    (0.00000002792, 3.89897022917, 358.93013930950),
    (0.00000002947, 5.31528985588, 55.13787859430),
    (0.00000002449, 3.44007536754, 206.18554843720),
    (0.00000002407, 4.38551271701, 60.55450456570),
    (0.00000002425, 2.22643225523, 66.70484372000),
    (0.00000002295, 2.31690029267, 31.49256938900),
    (0.00000002225, 0.41365126245, 81.37388070630),
    (0.00000002196, 0.76281798713, 17.52610781830),
    (0.00000002301, 3.60815987923, 288.08069400530),
    (0.00000002557, 0.73679737974, 200.76892246580),
    (0.00000002158, 2.61924330277, 13.33332212430),
    (0.00000002048, 6.27204714771, 98.89998852460),
    (0.00000002054, 3.61072687338, 333.65734504400),
    (0.00000002190, 2.49696729700, 76.47851959670),
    (0.00000002092, 1.66496421654, 235.39049596580),
    (0.00000002206, 2.35938756479, 347.88443904560),
    (0.00000002469, 4.70656858928, 186.21176006410),
    (0.00000002226, 5.97327738150, 1514.29129671650),
    (0.00000001851, 2.19455296942, 203.73786788240),
    (0.00000001865, 4.98207204280, 5.10780943070),
    (0.00000002171, 5.49034081907, 373.01422095920),
    (0.00000001999, 5.80509154216, 146.38180339690),
    (0.00000001903, 4.32950489567, 49.50880430180),
    (0.00000001732, 3.94794012202, 24.11838995730),
    (0.00000001747, 2.46883637489, 55.65914345610),
    (0.00000001833, 3.35110048460, 143.62530630140),
    (0.00000001686, 1.28621563322, 103.09277421860),
    (0.00000001720, 2.35857527806, 1.64453140270),
    (0.00000001641, 2.99507314472, 391.17346822390),
    (0.00000001610, 0.97420709262, 977.48678462110),
    (0.00000001696, 4.98332661473, 387.24131496080),
    (0.00000001527, 3.15107379811, 7.42236354150),
    (0.00000001570, 1.61119571428, 991.71387862270),
    (0.00000001497, 2.89637638984, 19.64371997300),
    (0.00000001507, 3.32822127349, 909.81873305460),
    (0.00000001375, 5.75263837916, 19.12245511120),
    (0.00000001407, 2.20244941425, 67.35923502580),
    (0.00000001364, 4.40006421418, 27.08733537390),
    (0.00000001357, 4.33780029649, 70.11573212130),
    (0.00000001311, 4.62202930578, 81.89514556810),
    (0.00000001307, 2.79964247834, 25.60286266560),
    (0.00000001312, 3.73623252660, 628.85158605010),
    (0.00000001286, 3.96557527092, 61.28821774860),
    (0.00000001723, 4.56068809303, 305.34616939270),
    (0.00000001313, 4.90611014973, 617.80588578620),
    (0.00000001508, 6.25017976193, 604.47256366190),
    (0.00000001235, 5.93779486368, 415.55249061210),
    (0.00000001278, 3.21119872139, 92.04707395470),
    (0.00000001357, 0.72647086107, 546.95644048200),
    (0.00000001552, 5.05296247763, 10.29494073850),
    (0.00000001230, 1.52077038294, 157.63995198190),
    (0.00000001210, 2.63049415027, 426.59819087600),
    (0.00000001206, 4.83219370572, 100.38446123290),
    (0.00000001234, 4.46203104116, 162.09337010680),
    (0.00000001174, 5.32356191090, 17.26547538740),
    (0.00000001431, 6.18138614295, 14.22709400160),
    (0.00000001244, 0.16929250603, 29.20494752860),
    (0.00000001180, 4.09719023908, 443.86366626340),
    (0.00000001180, 3.31438239649, 44.72531777680),
    (0.00000001259, 1.88793196065, 0.65439130580),
    (0.00000001263, 3.49967730885, 230.56457082540),
    (0.00000001168, 2.04071854201, 30.71067209630),
    (0.00000001523, 2.28101186489, 373.90799283650),
    (0.00000001429, 2.05075136274, 181.75834193920),
    (0.00000001065, 2.95960854361, 241.61027108930),
    (0.00000001253, 0.23639539817, 561.18353448360),
    (0.00000001255, 1.25819925760, 155.78297225810),
    (0.00000001044, 2.89293032709, 543.02428721890),
    (0.00000001062, 3.26314901318, 28.57180808220),
    (0.00000001124, 1.06535506684, 88.11492069160),
    (0.00000001186, 5.73445278027, 329.72519178090),
    (0.00000001190, 2.82438170535, 41.10198105440),
    (0.00000001067, 0.27101806190, 58.31927233200),
    (0.00000001017, 4.30527610005, 67.88049988760),
    (0.00000000959, 5.20504598622, 42.53826965290),
    (0.00000000984, 4.90934403664, 465.95506679120),
    (0.00000000944, 0.66925769374, 88.79624424780),
    (0.00000001017, 4.37095088461, 13.49338081870),
    (0.00000001222, 5.13450955699, 300.61086697750),
    (0.00000000989, 0.53937909300, 80.71948940050),
    (0.00000000890, 3.09802121989, 110.20632121940),
    (0.00000001095, 1.70637576740, 43.12897048390),
    (0.00000000992, 4.17968869928, 154.01661525950),
    (0.00000000950, 0.09841899432, 273.10284047830),
    (0.00000000870, 4.77500238443, 33.13710079170),
    (0.00000000867, 4.22078052532, 20.44686912510),
    (0.00000000830, 5.23785245773, 472.17484191470),
    (0.00000000884, 4.34377463442, 105.49227066360),
    (0.00000000812, 3.53258780148, 39.35687591520),
    (0.00000001055, 1.52219418153, 227.31374111850),
    (0.00000000963, 1.87806076896, 259.50888592310),
    (0.00000000859, 0.57844232244, 152.01087768940),
    (0.00000000861, 4.69213709412, 1059.38193018920),
    (0.00000001084, 2.79612346618, 48.75804477640),
    (0.00000000994, 2.87052008214, 454.90936652730),
    (0.00000000831, 1.62068330602, 554.06998748280),
    (0.00000000891, 2.85026036860, 32.24332891440),
    (0.00000000876, 0.83921717739, 4.73530241520),
    (0.00000000707, 6.16918394997, 3.62333672240),
    (0.00000000787, 1.95585343912, 16.46232623530),
    (0.00000000702, 5.49557046240, 558.00214074590),
    (0.00000000817, 0.38724470336, 378.64329525170),
    (0.00000000804, 2.25693582099, 16.04163511000),
    (0.00000000866, 1.80814575866, 258.87574647670),
    (0.00000000651, 3.72120167607, 286.59622129700),
    (0.00000000672, 1.00052727778, 522.57741809380),
    (0.00000000631, 4.14839739363, 141.69889060840),
    (0.00000000748, 4.19441869839, 486.40193591630),
    (0.00000000668, 0.77754011576, 120.99138905240),
    (0.00000000619, 4.31040053492, 455.87257437380),
    (0.00000000619, 4.77556598202, 453.94615868080),
    (0.00000000647, 5.74952736928, 119.50691634410),
    (0.00000000609, 0.24149609998, 117.91056905120),
    (0.00000000630, 1.79018649942, 440.68227252570),
    (0.00000000601, 1.41196883461, 218.92816973050),
    (0.00000000719, 4.27398947015, 50.40257617910),
    (0.00000000594, 3.92150462249, 25.27279426550),
    (0.00000000710, 0.45768559438, 536.80451209540),
    (0.00000000706, 6.15599144951, 258.02441321480),
    (0.00000000617, 2.80636989892, 68.56182344380),
    (0.00000000587, 5.47247350993, 767.36908292080),
    (0.00000000690, 3.48978614301, 835.03713448730),
    (0.00000000537, 4.06668446648, 450.97721326420),
    (0.00000000511, 0.60155300709, 264.50482076920),
    (0.00000000694, 1.18127476921, 129.91947716160),
    (0.00000000584, 1.94104733057, 106.27416795630),
    (0.00000000522, 5.95180617510, 518.64526483070),
    (0.00000000507, 4.39658523394, 121.84272231430),
    (0.00000000627, 2.24582628581, 218.40690486870),
    (0.00000000485, 0.02058107411, 106.01353552540),
    (0.00000000592, 2.06072766194, 296.15744885260),
    (0.00000000587, 0.18557470860, 458.09076026500),
    (0.00000000483, 1.50333774574, 150.52640498110),
    (0.00000000474, 4.99848521665, 458.84151979040),
    (0.00000000566, 1.94435189030, 699.70103135430),
    (0.00000000472, 1.86519720200, 180.16199464630),
    (0.00000000472, 0.07145793467, 216.48048917570),
    (0.00000000571, 6.01195273302, 47.06112374700),
    (0.00000000460, 3.76890954025, 342.25536475310),
    (0.00000000489, 2.96084966272, 385.75684225250),
    (0.00000000458, 1.99730631732, 275.55052103310),
    (0.00000000460, 5.75982407113, 89.75945209430),
    (0.00000000549, 1.43219978325, 171.65459766240),
    (0.00000000544, 0.04821904056, 114.39910691340),
    (0.00000000450, 1.94933296558, 148.59998928810),
    (0.00000000444, 2.94093732205, 692.58748435350),
    (0.00000000442, 2.15938034999, 173.68158709190),
    (0.00000000543, 2.61197342701, 451.72797278960),
    (0.00000000465, 0.31777753866, 756.32338265690),
    (0.00000000441, 2.82271922049, 32.71640966640),
    (0.00000000538, 2.39420182072, 339.28641933650),
    (0.00000000569, 0.84686482736, 260.99335863140),
    (0.00000000572, 5.40379754526, 278.51946644970),
    (0.00000000422, 4.61520857062, 40.16002506730),
    (0.00000000451, 4.50911201020, 142.14083359310),
    (0.00000000501, 0.18290112601, 331.32153907380),
    (0.00000000468, 0.97688759019, 760.25553592000),
    (0.00000000443, 4.58896013561, 149.67507171920),
    (0.00000000428, 1.02564850231, 469.13646052890),
    (0.00000000500, 4.34235307579, 166.82867252200),
    (0.00000000412, 5.69502940499, 92.30770638560),
    (0.00000000404, 5.18855270166, 22.63391724900),
    (0.00000000396, 3.98515136901, 31.23193695810),
    (0.00000000421, 5.47567810199, 104.00779795530),
    (0.00000000425, 3.50702044406, 180.27386923090),
    (0.00000000415, 1.52291071520, 497.44763618020),
    (0.00000000430, 2.39159932023, 39.09624348430),
    (0.00000000401, 0.55271143649, 95.38852638680),
    (0.00000000384, 2.48712922138, 210.33015002140),
    (0.00000000422, 1.02056886848, 468.24268865160),
    (0.00000000465, 5.72323435231, 183.24281464750),
    (0.00000000383, 2.63486938783, 685.47393735270),
    (0.00000000367, 5.39331524988, 874.39401040250),
    (0.00000000461, 3.57961254790, 187.69623277240),
    (0.00000000409, 4.21780704807, 181.05576652360),
    (0.00000000440, 0.36380766054, 367.97010200330),
    (0.00000000392, 5.44355925956, 26.02355379090),
    (0.00000000431, 3.83885208954, 254.94359321360),
    (0.00000000366, 2.92275490656, 291.26208774300),
    (0.00000000416, 2.54190330826, 255.05546779820),
    (0.00000000348, 0.35176743482, 46.47042291600),
    (0.00000000413, 2.41518097006, 483.22054217860),
    (0.00000000386, 4.76483292968, 268.43697403230),
    (0.00000000344, 0.20350283971, 184.09414790940),
    (0.00000000350, 1.24205287122, 97.41551581630),
    (0.00000000361, 5.68393391400, 353.30106501700),
    (0.00000000359, 2.62171903648, 162.89651925890),
    (0.00000000381, 3.38777292581, 114.94162363460),
    (0.00000000352, 2.76374792259, 295.19424100610),
    (0.00000000340, 1.34666360560, 34.20088237470),
    (0.00000000433, 1.90504858871, 123.53964334370),
    (0.00000000389, 2.41268196916, 381.61224066830),
    (0.00000000383, 3.20416581825, 79.44746501330),
    (0.00000000369, 2.15185889720, 555.55446019110),
    (0.00000000370, 2.19402183275, 562.66800719190),
    (0.00000000327, 3.40081544565, 309.27832265580),
    (0.00000000378, 5.75737470182, 916.93228005540),
    (0.00000000318, 4.53066393124, 350.33211960040),
    (0.00000000376, 1.74845257914, 545.47196777370),
    (0.00000000346, 4.15815107375, 282.66406803390),
    (0.00000000319, 4.38123849114, 154.97982310600),
    (0.00000000320, 0.81846631878, 610.69233878540),
    (0.00000000327, 5.07873875355, 189.72322220190),
    (0.00000000306, 1.71903179875, 394.35486196160),
    (0.00000000329, 1.82999432252, 706.81457835510),
    (0.00000000335, 4.78622577105, 109.31254934210),
    (0.00000000310, 5.08120849869, 376.19561469690),
    (0.00000000327, 1.87637598331, 207.88246946660),
    (0.00000000323, 1.88845451800, 192.69216761850),
    (0.00000000284, 2.88222063053, 384.05992122310),
    (0.00000000283, 4.63187254084, 332.17287233570),
    (0.00000000294, 2.84554743359, 267.47376618580),
    (0.00000000285, 0.97965330777, 113.87784205160),
    (0.00000000319, 5.09582764612, 285.63301345050),
    (0.00000000280, 0.67871105907, 312.45971639350),
    (0.00000000300, 5.93285242876, 124.29040286910),
    (0.00000000320, 4.86151247369, 448.68959140380),
    (0.00000000310, 3.75000484412, 253.57099508990),
    (0.00000000311, 5.59686590720, 271.40591944890),
    (0.00000000316, 1.89686876211, 228.27694896500),
    (0.00000000269, 0.14585942744, 142.66209845490),
    (0.00000000270, 2.12904548682, 778.41478318470),
    (0.00000000267, 0.96560769114, 90.82323367730),
    (0.00000000308, 1.38454900684, 375.39246554480),
    (0.00000000298, 3.99595366039, 451.94042111070),
    (0.00000000278, 3.38339026214, 346.39996633730),
    (0.00000000287, 1.01918432834, 905.88657979150),
    (0.00000000263, 0.16921968622, 124.50285119020),
    (0.00000000283, 5.95865378023, 362.86229257260),
    (0.00000000266, 3.07331582044, 193.65537546500),
    (0.00000000264, 5.47114459575, 133.10087089930),
    (0.00000000288, 2.78232740152, 1812.52391910840),
    (0.00000000361, 4.30140629884, 198.32124191100),
    (0.00000000257, 1.60206491208, 369.08206769610),
    (0.00000000274, 2.88347680082, 233.90602325750),
    (0.00000000267, 4.90554019072, 681.54178408960),
    (0.00000000305, 1.55983861329, 49.72125262290),
    (0.00000000253, 0.50457429429, 316.39186965660),
    (0.00000000258, 5.81453094409, 630.33605875840),
    (0.00000000280, 1.15452517706, 986.08480433020),
    (0.00000000265, 4.93584097286, 831.10498122420),
    (0.00000000246, 1.25186233620, 134.06407874580),
    (0.00000000298, 5.75927878031, 902.70518605380),
    (0.00000000240, 2.84888261768, 44.09217833040),
    (0.00000000261, 2.20643594285, 73.08467753790),
    (0.00000000321, 3.46864827820, 372.42352012820),
    (0.00000000234, 6.06783988023, 147.11551657980),
    (0.00000000262, 2.69623862046, 167.72244439930),
    (0.00000000267, 4.05985113852, 75.30286342910),
    (0.00000000240, 0.48471871511, 172.19711438360),
    (0.00000000261, 4.64354183979, 535.32003938710),
    (0.00000000244, 5.85987959874, 507.59956456680),
    (0.00000000237, 4.79666486485, 377.15882254340),
    (0.00000000224, 1.94589447357, 593.42686339800),
    (0.00000000226, 3.71637531808, 449.28029223480),
    (0.00000000233, 5.98739382153, 219.89137757700),
    (0.00000000240, 2.71609791875, 227.52618943960),
    (0.00000000221, 2.23218400256, 460.53844081980),
    (0.00000000226, 2.74516124394, 446.31134681820),
    (0.00000000221, 3.20339807670, 463.50738623640),
    (0.00000000203, 5.04975483055, 457.87831194390),
    (0.00000000191, 4.24841510229, 4.66586644600),
    (0.00000000169, 0.59358171769, 983.11585891360),
    (0.00000000179, 4.12060524413, 310.17209453310),
    (0.00000000187, 6.22165475247, 294.67297614430),
    (0.00000000162, 1.30776665222, 248.72381809010),
    (0.00000000219, 4.17413407057, 303.86169668440),
    (0.00000000193, 1.64715944768, 91.45637312370),
    (0.00000000170, 2.18067759964, 66.18357885820),
    (0.00000000156, 4.92094728667, 68.18931642830),
    (0.00000000145, 5.51404722738, 280.96714700450),
    (0.00000000144, 5.81835834612, 75.53235809270),
    (0.00000000153, 0.48549989656, 144.89733068860),
    (0.00000000168, 5.81402201452, 149.45132255000),
    (0.00000000150, 4.66632209585, 306.83064210100),
    (0.00000000131, 1.01359934164, 175.16605980020),
    (0.00000000174, 3.03279013213, 298.23262239190),
    (0.00000000163, 1.97665571311, 221.16340196420),
    (0.00000000144, 2.59058085010, 217.23124870110),
    (0.00000000167, 2.74604167580, 69.15252427480),
    (0.00000000129, 2.87574897902, 156.15547927360),
)

L2 = (
    (0.00053033277, 0.00000000000, 0.00000000000),
    (0.00002357636, 2.26014661705, 74.78159856730),
    (0.00000769129, 4.52561041823, 11.04570026390),
    (0.00000551533, 3.25814281023, 63.73589830340),
    (0.00000541532, 2.27573907424, 3.93215326310),
    (0.00000529473, 4.92348433826, 1.48447270830),
    (0.00000257521, 3.69059216858, 3.18139373770),
    (0.00000238835, 5.85806638405, 149.56319713460),
    (0.00000181904, 6.21763603405, 70.84944530420),
    (0.00000049401, 6.03101301723, 56.62235130260),
    (0.00000053504, 1.44225240953, 76.26607127560),
    (0.00000038222, 1.78467827781, 52.69019803950),
    (0.00000044753, 3.90904910523, 2.44768055480),
    (0.00000044530, 0.81152639478, 85.82729883120),
    (0.00000037403, 4.46228598032, 2.96894541660),
    (0.00000033029, 0.86388149962, 9.56122755560),
    (0.00000024292, 2.10702559049, 18.15924726470),
    (0.00000029423, 5.09818697708, 73.29712585900),
    (0.00000022135, 4.81730808582, 78.71375183040),
    (0.00000022491, 5.99320728691, 138.51749687070),
    (0.00000017226, 2.53537183199, 145.63104387150),
    (0.00000021392, 2.39880709309, 77.96299230500),
    (0.00000020578, 2.16918786539, 224.34479570190),
    (0.00000016777, 3.46631344086, 12.53017297220),
    (0.00000012012, 0.01941361902, 22.09140052780),
    (0.00000010466, 4.45556032593, 62.25142559510),
    (0.00000011010, 0.08496274370, 127.47179660680),
    (0.00000008668, 4.25550086984, 7.11354700080),
    (0.00000010476, 5.16453084068, 71.60020482960),
    (0.00000007160, 1.24903906391, 5.41662597140),
    (0.00000008387, 5.50115930045, 67.66805156650),
    (0.00000006087, 5.44611674384, 65.22037101170),
    (0.00000006013, 4.51836836347, 151.04766984290),
    (0.00000005718, 1.82933915340, 202.25339517410),
    (0.00000006109, 3.36320161279, 447.79581952650),
    (0.00000006003, 5.72500086735, 462.02291352810),
    (0.00000005111, 3.52374555791, 59.80374504030),
    (0.00000005155, 1.05810305746, 131.40394986990),
    (0.00000005969, 5.61147374852, 148.07872442630),
    (0.00000005065, 3.36477113418, 4.45341812490),
    (0.00000004845, 1.20298837109, 71.81265315070),
    (0.00000003979, 0.67629577193, 77.75054398390),
    (0.00000003673, 1.76315074166, 351.81659230870),
    (0.00000003149, 3.83590892865, 45.57665103870),
    (0.00000003036, 3.32062892682, 160.60889739850),
    (0.00000003033, 6.14532331482, 77.22927912210),
    (0.00000003596, 4.57256025582, 454.90936652730),
    (0.00000002664, 5.36121614612, 269.92144674060),
    (0.00000002498, 1.04819496324, 69.36497259590),
    (0.00000002307, 2.69282373897, 84.34282612290),
    (0.00000002249, 5.07693376112, 14.97785352700),
    (0.00000002228, 1.38937510191, 284.14854074220),
    (0.00000002064, 4.34647674542, 984.60033162190),
    (0.00000002105, 2.32047802326, 120.35824960600),
    (0.00000001864, 5.70354779393, 54.17467074780),
    (0.00000002005, 3.87177765185, 195.13984817330),
    (0.00000001622, 5.07964536529, 209.36694217490),
    (0.00000001597, 0.48807990368, 137.03302416240),
    (0.00000001583, 2.90536212187, 51.20572533120),
    (0.00000001725, 6.25703202673, 41.64449777560),
    (0.00000002073, 1.24032244487, 35.16409022120),
    (0.00000001543, 2.15414338268, 70.32818044240),
    (0.00000001671, 6.28283232471, 277.03499374140),
    (0.00000001494, 6.04572758571, 87.31177153950),
    (0.00000001418, 1.15843502159, 213.29909543800),
    (0.00000001239, 4.63223076077, 92.94084583200),
    (0.00000001238, 2.65969680342, 134.58534360760),
    (0.00000001273, 5.87964059822, 60.55450456570),
    (0.00000001160, 1.03320781667, 153.49535039770),
    (0.00000001430, 4.68022239016, 299.12639426920),
    (0.00000001117, 2.62506108047, 72.33391801250),
    (0.00000001142, 4.64615099782, 152.74459087230),
    (0.00000000974, 2.85233132493, 222.86032299360),
    (0.00000001046, 4.81299135934, 116.42609634290),
    (0.00000000872, 3.49659835508, 340.77089204480),
    (0.00000000952, 2.10837480840, 20.60692781950),
    (0.00000000964, 2.46471453524, 380.12776796000),
    (0.00000000843, 6.12869288891, 49.50880430180),
    (0.00000000821, 0.27134156683, 191.20769491020),
    (0.00000000813, 4.08930465981, 14.22709400160),
    (0.00000000796, 6.17066846300, 344.70304530790),
    (0.00000000924, 2.11096444289, 14.01464568050),
    (0.00000000791, 2.38927423348, 58.10682401090),
    (0.00000000781, 0.74223115950, 408.43894361130),
    (0.00000000759, 3.77564054479, 80.19822453870),
    (0.00000000884, 1.99930014838, 265.98929347750),
    (0.00000000722, 3.10001033669, 422.66603761290),
    (0.00000000750, 2.33167721991, 358.93013930950),
    (0.00000000687, 2.02866342040, 33.67961751290),
    (0.00000000603, 1.10391172652, 55.13787859430),
    (0.00000000655, 3.85415269764, 16.67477455640),
    (0.00000000606, 0.15052747979, 28.31117565130),
    (0.00000000639, 5.16714934188, 23.57587323610),
    (0.00000000658, 0.75636229109, 76.47851959670),
    (0.00000000590, 1.73778850095, 8.07675484730),
    (0.00000000565, 4.92645232089, 35.42472265210),
    (0.00000000656, 2.34273264083, 38.13303563780),
    (0.00000000542, 5.97968975563, 146.59425171800),
    (0.00000000518, 3.19086220901, 152.53214255120),
    (0.00000000536, 4.52808465499, 220.41264243880),
    (0.00000000489, 4.80633294199, 159.12442469020),
    (0.00000000491, 0.85765309118, 565.11568774670),
    (0.00000000483, 3.52583593251, 144.14657116320),
    (0.00000000521, 5.21561656321, 206.18554843720),
    (0.00000000477, 4.25420753202, 365.90067395840),
    (0.00000000466, 5.13219663072, 297.64192156090),
    (0.00000000557, 0.98387565952, 225.82926841020),
    (0.00000000531, 4.22534657450, 29.20494752860),
    (0.00000000500, 3.49663062387, 128.95626931510),
    (0.00000000445, 2.60797570173, 96.87299909510),
    (0.00000000466, 6.05585106742, 70.11573212130),
    (0.00000000425, 1.04692398351, 19.64371997300),
    (0.00000000491, 2.26123398680, 152.01087768940),
    (0.00000000455, 5.45520675000, 333.65734504400),
    (0.00000000458, 0.91654899383, 373.01422095920),
    (0.00000000520, 5.72828536642, 111.43016149680),
    (0.00000000432, 1.04604024916, 125.98732389850),
    (0.00000000387, 2.82547341355, 200.76892246580),
    (0.00000000383, 1.91679738697, 5.62907429250),
    (0.00000000504, 1.95816731769, 415.55249061210),
    (0.00000000370, 3.21958844151, 387.24131496080),
    (0.00000000379, 2.75940848661, 81.89514556810),
    (0.00000000345, 2.98021540638, 429.77958461370),
    (0.00000000368, 6.20331898497, 456.39383923560),
    (0.00000000335, 5.29062985955, 13.33332212430),
    (0.00000000320, 0.74685222907, 347.88443904560),
    (0.00000000307, 1.65925943351, 99.16062095550),
    (0.00000000284, 2.09437476480, 129.91947716160),
    (0.00000000275, 0.62680026669, 31.49256938900),
    (0.00000000339, 1.65968150805, 142.44965013380),
    (0.00000000270, 2.79378345550, 977.48678462110),
    (0.00000000284, 2.42261530322, 546.95644048200),
    (0.00000000271, 0.59225635449, 1894.41906467650),
    (0.00000000263, 3.49309481771, 440.68227252570),
    (0.00000000295, 0.43376026627, 373.90799283650),
    (0.00000000271, 4.82853730065, 561.18353448360),
    (0.00000000248, 5.72379940676, 79.23501669220),
    (0.00000000252, 5.76728095309, 235.39049596580),
    (0.00000000261, 0.09830739366, 991.71387862270),
    (0.00000000238, 1.14634663242, 288.08069400530),
    (0.00000000220, 5.12386263728, 479.28838891550),
    (0.00000000263, 1.52366362053, 146.38180339690),
    (0.00000000230, 0.35983101967, 109.94568878850),
    (0.00000000214, 2.94388765580, 184.72728735580),
    (0.00000000198, 5.72107161521, 453.42489381900),
    (0.00000000185, 4.71600176780, 108.46121608020),
    (0.00000000139, 2.99832472431, 211.81462272970),
    (0.00000000167, 1.19643522280, 39.61750834610),
    (0.00000000180, 0.80198096578, 183.24281464750),
    (0.00000000131, 2.73236351123, 522.57741809380),
    (0.00000000142, 5.03489222377, 536.80451209540),
)

L3 = (
    (0.00000120936, 0.02418789918, 74.78159856730),
    (0.00000068064, 4.12084267733, 3.93215326310),
    (0.00000052828, 2.38964061260, 11.04570026390),
    (0.00000043754, 2.95965039734, 1.48447270830),
    (0.00000045300, 2.04423798410, 3.18139373770),
    (0.00000045806, 0.00000000000, 0.00000000000),
    (0.00000024969, 4.88741307918, 63.73589830340),
    (0.00000021061, 4.54511486862, 70.84944530420),
    (0.00000019897, 2.31320314136, 149.56319713460),
    (0.00000008901, 1.57548871761, 56.62235130260),
    (0.00000004271, 0.22777319552, 18.15924726470),
    (0.00000003613, 5.39244611308, 76.26607127560),
    (0.00000003488, 4.97622811775, 85.82729883120),
    (0.00000003479, 4.12969359977, 52.69019803950),
    (0.00000003572, 0.95052448578, 77.96299230500),
    (0.00000002328, 0.85770961794, 145.63104387150),
    (0.00000002696, 0.37287796344, 78.71375183040),
    (0.00000001946, 2.67997393431, 7.11354700080),
    (0.00000002156, 5.65647821519, 9.56122755560),
    (0.00000001363, 4.86983744746, 224.34479570190),
    (0.00000001333, 1.25032115614, 12.53017297220),
    (0.00000001613, 0.48764377311, 71.60020482960),
    (0.00000001475, 5.19957293069, 73.29712585900),
    (0.00000001225, 3.93406822032, 22.09140052780),
    (0.00000000911, 2.18921999026, 127.47179660680),
    (0.00000000811, 3.98323855938, 462.02291352810),
    (0.00000000808, 5.06374463008, 447.79581952650),
    (0.00000000718, 0.34600103024, 5.62907429250),
    (0.00000000722, 1.05856935832, 138.51749687070),
    (0.00000000687, 2.93752748595, 131.40394986990),
    (0.00000000463, 1.58927254512, 151.04766984290),
    (0.00000000414, 4.32904287620, 120.35824960600),
    (0.00000000372, 0.73596518002, 269.92144674060),
    (0.00000000345, 3.05968942771, 561.18353448360),
    (0.00000000338, 5.94221536204, 284.14854074220),
    (0.00000000343, 4.01891371998, 546.95644048200),
    (0.00000000382, 5.93515231196, 45.57665103870),
    (0.00000000276, 3.44212110991, 202.25339517410),
    (0.00000000300, 1.13119175675, 160.60889739850),
    (0.00000000268, 3.24615387968, 536.80451209540),
    (0.00000000358, 1.10916640253, 333.65734504400),
    (0.00000000236, 4.65292396535, 387.24131496080),
    (0.00000000204, 5.81663798296, 373.01422095920),
    (0.00000000145, 2.75632381347, 92.94084583200),
    (0.00000000149, 0.13764106563, 71.81265315070),
    (0.00000000156, 2.90936922804, 153.49535039770),
)

L4 = (
    (0.00000113855, 3.14159265359, 0.00000000000),
    (0.00000005599, 4.57882424417, 74.78159856730),
    (0.00000003203, 0.34623003207, 11.04570026390),
    (0.00000001217, 3.42199121826, 56.62235130260),
    (0.00000000634, 4.65759668097, 18.15924726470),
    (0.00000000171, 3.80393539303, 149.56319713460),
    (0.00000000133, 4.35519131657, 63.73589830340),
)

L5 = (
    (0.00000000873, 3.14159265359, 0.00000000000),
)

B0 = (
    (0.01346277639, 2.61877810545, 74.78159856730),
    (0.00062341405, 5.08111175856, 149.56319713460),
    (0.00061601203, 3.14159265359, 0.00000000000),
    (0.00009963744, 1.61603876357, 76.26607127560),
    (0.00009926151, 0.57630387917, 73.29712585900),
    (0.00003259455, 1.26119385960, 224.34479570190),
    (0.00002972318, 2.24367035538, 1.48447270830),
    (0.00002010257, 6.05550401088, 148.07872442630),
    (0.00001522172, 0.27960386377, 63.73589830340),
    (0.00000924055, 4.03822927853, 151.04766984290),
    (0.00000760624, 6.14000431923, 71.81265315070),
    (0.00000420265, 5.21279984788, 11.04570026390),
    (0.00000430668, 3.55445034854, 213.29909543800),
    (0.00000436843, 3.38082524317, 529.69096509460),
    (0.00000522309, 3.32085194770, 138.51749687070),
    (0.00000434625, 0.34065281858, 77.75054398390),
    (0.00000462630, 0.74256727574, 85.82729883120),
    (0.00000232649, 2.25716421383, 222.86032299360),
    (0.00000215838, 1.59121704940, 38.13303563780),
    (0.00000244698, 0.78795150326, 2.96894541660),
    (0.00000179935, 3.72487952673, 299.12639426920),
    (0.00000174895, 1.23550262213, 146.59425171800),
    (0.00000173667, 1.93654269131, 380.12776796000),
    (0.00000160368, 5.33635436463, 111.43016149680),
    (0.00000144064, 5.96239326415, 35.16409022120),
    (0.00000102049, 2.61876256513, 78.71375183040),
    (0.00000116363, 5.73877190007, 70.84944530420),
    (0.00000106441, 0.94103112994, 70.32818044240),
    (0.00000086163, 0.70262506622, 39.61750834610),
    (0.00000072617, 0.20564696113, 225.82926841020),
    (0.00000071172, 0.83343269975, 109.94568878850),
    (0.00000057502, 2.67039425415, 108.46121608020),
    (0.00000054255, 3.35166579613, 184.72728735580),
    (0.00000044470, 2.74408231138, 152.53214255120),
    (0.00000038591, 5.17394663303, 202.25339517410),
    (0.00000039157, 2.17108251341, 351.81659230870),
    (0.00000041346, 3.22134319551, 160.60889739850),
    (0.00000035140, 4.00111634363, 112.91463420510),
    (0.00000033073, 3.61378095742, 221.37585028530),
    (0.00000031315, 2.71969470781, 145.10977900970),
    (0.00000037336, 4.02053241202, 52.69019803950),
    (0.00000032028, 1.29160071142, 145.63104387150),
    (0.00000027574, 3.70064266960, 36.64856292950),
    (0.00000024277, 2.84989187496, 127.47179660680),
    (0.00000024635, 1.11645461259, 3.93215326310),
    (0.00000024315, 5.48987913644, 79.23501669220),
    (0.00000021418, 0.63722900407, 277.03499374140),
    (0.00000019826, 2.59334182230, 84.34282612290),
    (0.00000022373, 5.73687615457, 4.45341812490),
    (0.00000019137, 1.30214105578, 62.25142559510),
    (0.00000019789, 4.72260849557, 297.64192156090),
    (0.00000020299, 1.06070151806, 454.90936652730),
    (0.00000019768, 5.77906142568, 305.34616939270),
    (0.00000021348, 1.01350946382, 33.67961751290),
    (0.00000015142, 2.91786832554, 426.59819087600),
    (0.00000016000, 1.95535748902, 186.21176006410),
    (0.00000013819, 2.67163927171, 74.66972398270),
    (0.00000011463, 5.73391138419, 41.10198105440),
    (0.00000010741, 3.73401569675, 1059.38193018920),
    (0.00000011450, 3.98177764866, 106.97674337190),
    (0.00000010360, 4.75567608732, 183.24281464750),
    (0.00000010232, 6.18772866993, 373.90799283650),
    (0.00000013803, 5.70712120608, 74.89347315190),
    (0.00000010553, 3.78602881738, 490.33408917940),
    (0.00000011838, 5.96756415681, 87.31177153950),
    (0.00000010030, 1.74828757238, 22.09140052780),
    (0.00000010107, 0.92911975959, 65.22037101170),
    (0.00000009127, 5.11093790809, 153.49535039770),
    (0.00000012093, 2.53736362742, 9.56122755560),
    (0.00000008646, 4.18351923569, 12.53017297220),
    (0.00000009978, 5.83600622359, 604.47256366190),
    (0.00000011352, 2.12645777694, 68.84370773410),
    (0.00000008472, 3.36885457285, 72.33391801250),
    (0.00000007797, 5.11771906359, 77.96299230500),
    (0.00000008302, 5.19247905162, 77.22927912210),
    (0.00000007696, 3.25189037096, 71.60020482960),
    (0.00000007513, 2.98265970100, 114.39910691340),
    (0.00000006947, 3.31871016057, 56.62235130260),
    (0.00000006490, 0.88434578474, 288.08069400530),
    (0.00000006394, 3.51142812432, 220.41264243880),
    (0.00000006211, 0.58222518453, 340.77089204480),
    (0.00000006772, 4.09374798222, 137.03302416240),
    (0.00000005595, 5.68643434536, 259.50888592310),
    (0.00000005309, 2.65421183211, 300.61086697750),
    (0.00000004950, 4.99672086239, 219.89137757700),
    (0.00000006419, 0.44895727879, 140.00196957900),
    (0.00000004975, 4.06722486039, 143.62530630140),
    (0.00000005692, 3.76563463180, 67.66805156650),
    (0.00000004853, 2.03383592524, 415.55249061210),
    (0.00000003796, 1.26231186682, 75.30286342910),
    (0.00000003807, 2.24787582155, 909.81873305460),
    (0.00000003812, 3.10475682509, 181.75834193920),
    (0.00000003764, 5.20052090560, 227.31374111850),
    (0.00000003445, 5.91769433069, 296.15744885260),
    (0.00000003517, 5.44397685665, 628.85158605010),
    (0.00000003943, 4.95136058926, 265.98929347750),
    (0.00000003472, 0.34737998380, 131.40394986990),
    (0.00000003390, 0.53497504164, 206.18554843720),
    (0.00000003038, 4.68314286209, 159.12442469020),
    (0.00000003190, 5.68929316349, 235.39049596580),
    (0.00000003303, 2.09359507373, 73.81839072080),
    (0.00000003069, 4.49065085092, 66.70484372000),
    (0.00000003285, 0.00780313833, 75.74480641380),
    (0.00000002917, 4.21615078632, 258.02441321480),
    (0.00000003747, 0.82999983666, 74.26033370550),
    (0.00000002814, 3.96708337625, 82.85835341460),
    (0.00000002474, 3.81319259323, 7.11354700080),
    (0.00000002394, 2.21483198491, 54.17467074780),
    (0.00000002555, 2.97023907145, 378.64329525170),
    (0.00000002631, 1.55153254691, 154.01661525950),
    (0.00000002633, 2.28385552693, 32.19514480460),
    (0.00000002643, 3.96832729680, 381.61224066830),
    (0.00000002206, 3.06995275892, 59.80374504030),
    (0.00000002635, 0.53987945692, 211.81462272970),
    (0.00000002071, 1.97429082033, 18.15924726470),
    (0.00000002485, 3.55433846990, 96.87299909510),
    (0.00000002061, 4.50102695788, 5.93789083320),
    (0.00000001916, 1.60538526374, 80.19822453870),
    (0.00000002480, 0.63321072542, 187.69623277240),
    (0.00000002039, 2.97351088965, 191.20769491020),
    (0.00000001833, 1.95824865568, 81.89514556810),
    (0.00000001719, 2.22526635038, 479.28838891550),
    (0.00000001745, 3.22821992592, 218.40690486870),
    (0.00000001857, 1.66304484985, 984.60033162190),
    (0.00000001766, 5.24239122261, 105.49227066360),
    (0.00000001524, 6.05374020264, 99.16062095550),
    (0.00000001519, 0.94716867229, 372.42352012820),
    (0.00000001614, 3.39986066169, 230.56457082540),
    (0.00000001711, 3.44237080993, 522.57741809380),
    (0.00000001504, 1.34653259405, 74.52096613640),
    (0.00000001577, 4.38020936720, 80.71948940050),
    (0.00000001360, 5.48691240270, 74.82978267710),
    (0.00000001364, 4.56045715617, 42.58645376270),
    (0.00000001398, 0.33827838973, 142.44965013380),
    (0.00000001709, 3.63188407264, 554.06998748280),
    (0.00000001360, 2.89305157919, 74.73341445750),
    (0.00000001260, 5.50922979275, 74.94165726170),
    (0.00000001374, 4.39897993200, 260.99335863140),
    (0.00000001366, 2.15288773765, 162.09337010680),
    (0.00000001244, 4.97789913094, 149.45132255000),
    (0.00000001269, 0.84167691738, 767.36908292080),
    (0.00000001278, 4.53585702916, 294.67297614430),
    (0.00000001342, 5.11117141196, 51.20572533120),
    (0.00000001180, 0.79882196802, 116.42609634290),
    (0.00000001495, 0.74986873597, 75.04223099820),
    (0.00000001207, 3.67288675913, 20.60692781950),
    (0.00000001181, 4.39598416757, 180.27386923090),
    (0.00000001248, 3.13312504066, 67.35923502580),
    (0.00000001263, 2.87116663203, 74.62153987290),
    (0.00000001380, 3.76141611602, 92.94084583200),
    (0.00000001113, 3.87133607367, 39.35687591520),
    (0.00000001018, 6.20393099094, 835.03713448730),
    (0.00000000962, 3.30343472839, 255.05546779820),
    (0.00000001238, 1.73023505315, 149.67507171920),
    (0.00000000970, 1.71236273285, 115.88357962170),
    (0.00000001001, 5.49914631698, 256.53994050650),
    (0.00000000921, 3.07729879788, 8.07675484730),
    (0.00000000914, 0.00764291274, 536.80451209540),
    (0.00000000911, 6.23753038018, 200.76892246580),
    (0.00000000956, 5.76811833839, 128.95626931510),
    (0.00000000999, 0.33400530567, 404.50679034820),
    (0.00000000952, 3.00456073496, 14.97785352700),
    (0.00000000765, 3.45454533660, 214.78356814630),
    (0.00000000800, 3.20912932090, 28.31117565130),
    (0.00000000799, 4.11425365829, 125.98732389850),
    (0.00000001021, 1.79905869707, 3.18139373770),
    (0.00000000706, 5.80210566917, 157.63995198190),
    (0.00000000715, 5.56313177065, 146.38180339690),
    (0.00000000689, 1.84748347121, 41.64449777560),
    (0.00000000682, 5.16479782395, 74.03083904190),
    (0.00000000673, 2.65544175682, 75.53235809270),
    (0.00000000723, 4.75905991606, 331.32153907380),
    (0.00000000730, 2.25510749124, 453.42489381900),
    (0.00000000691, 3.58561635364, 362.86229257260),
    (0.00000000641, 5.77408891198, 110.20632121940),
    (0.00000000671, 5.96862039131, 135.54855145410),
    (0.00000000631, 1.97807297205, 639.89728631400),
    (0.00000000774, 0.42035450706, 565.11568774670),
    (0.00000000705, 2.94649553712, 60.76695288680),
    (0.00000000663, 5.32574112049, 142.14083359310),
    (0.00000000612, 2.01741578932, 195.13984817330),
    (0.00000000749, 5.56828487823, 2.44768055480),
    (0.00000000798, 0.90969731665, 152.01087768940),
    (0.00000000747, 5.07639466593, 89.75945209430),
    (0.00000000650, 4.56215718085, 216.92243216040),
    (0.00000000651, 2.80626026285, 50.40257617910),
    (0.00000000593, 1.89556258897, 203.73786788240),
    (0.00000000550, 2.90625551534, 68.18931642830),
    (0.00000000548, 3.75628845322, 617.80588578620),
    (0.00000000554, 2.78135114877, 14.01464568050),
    (0.00000000530, 3.51385025328, 291.70403072770),
    (0.00000000506, 4.94619342366, 81.37388070630),
    (0.00000000649, 5.74895589744, 141.48644228730),
    (0.00000000593, 5.40734033998, 692.58748435350),
    (0.00000000544, 2.99910512780, 152.74459087230),
    (0.00000000485, 2.36317665443, 448.68959140380),
    (0.00000000481, 5.81647231299, 134.58534360760),
    (0.00000000517, 4.97759795528, 387.24131496080),
    (0.00000000573, 2.46311368783, 81.00137369080),
    (0.00000000470, 1.30184316812, 228.27694896500),
    (0.00000000475, 0.53480492526, 303.86169668440),
    (0.00000000485, 6.21247575899, 5.41662597140),
    (0.00000000468, 0.55881267334, 23.57587323610),
    (0.00000000585, 4.67924542643, 88.79624424780),
    (0.00000000512, 5.86200059955, 293.18850343600),
    (0.00000000445, 2.50076311432, 905.88657979150),
    (0.00000000501, 4.79997295899, 306.83064210100),
    (0.00000000418, 5.21379084769, 35.42472265210),
    (0.00000000408, 5.69107313998, 284.14854074220),
    (0.00000000474, 3.03149617428, 286.59622129700),
    (0.00000000432, 4.20907682097, 278.51946644970),
    (0.00000000506, 2.05348204197, 373.01422095920),
    (0.00000000410, 5.30637634877, 95.38852638680),
    (0.00000000478, 2.41106642594, 358.93013930950),
    (0.00000000536, 1.82614772260, 114.13847448250),
    (0.00000000383, 5.54541241459, 419.48464387520),
    (0.00000000413, 0.03813081773, 103.09277421860),
    (0.00000000368, 4.08526832792, 1589.07289528380),
    (0.00000000369, 1.82533858431, 334.29048449040),
    (0.00000000491, 5.58913582973, 68.56182344380),
    (0.00000000387, 0.56619310480, 602.98809095360),
    (0.00000000427, 5.08349119654, 367.97010200330),
    (0.00000000475, 0.17507881032, 120.35824960600),
    (0.00000000342, 5.27187859255, 28.57180808220),
    (0.00000000407, 2.00853504718, 679.25416222920),
    (0.00000000381, 4.61366060949, 329.72519178090),
    (0.00000000388, 0.88856038803, 483.22054217860),
    (0.00000000376, 1.28856348513, 155.78297225810),
    (0.00000000326, 6.09140263554, 456.39383923560),
    (0.00000000318, 0.09996195379, 69.36497259590),
    (0.00000000292, 5.11578046796, 375.39246554480),
    (0.00000000299, 6.04121646505, 332.80601178210),
    (0.00000000328, 3.47252263966, 73.40900044360),
    (0.00000000283, 1.81773059325, 647.01083331480),
    (0.00000000308, 3.50154864071, 30.71067209630),
    (0.00000000283, 1.88910019831, 24.37902238820),
    (0.00000000278, 3.85507901929, 760.25553592000),
    (0.00000000273, 4.22941219477, 391.17346822390),
    (0.00000000293, 5.44464406156, 477.91579079180),
    (0.00000000289, 3.85492516765, 209.36694217490),
    (0.00000000309, 1.97045147502, 543.02428721890),
    (0.00000000324, 5.57191515554, 501.37978944330),
    (0.00000000248, 2.17741598681, 611.58611066270),
    (0.00000000245, 1.04008534095, 1332.48477066750),
    (0.00000000248, 6.19516038159, 1134.16352875650),
    (0.00000000242, 1.37720813333, 121.25202148330),
    (0.00000000233, 0.50933224249, 462.02291352810),
    (0.00000000319, 4.24219881040, 328.35259365720),
    (0.00000000244, 6.00644853640, 295.19424100610),
    (0.00000000228, 0.72608678727, 233.90602325750),
    (0.00000000223, 5.35785607671, 983.11585891360),
    (0.00000000304, 5.68101077712, 189.18070548070),
    (0.00000000223, 2.04168197187, 370.93904741990),
    (0.00000000245, 4.69742022955, 316.39186965660),
    (0.00000000217, 4.33845164683, 269.92144674060),
    (0.00000000267, 0.15744446718, 10213.28554621100),
    (0.00000000210, 5.84975171904, 147.11551657980),
    (0.00000000224, 3.04829549918, 1439.50969814920),
    (0.00000000226, 0.72248476212, 45.57665103870),
    (0.00000000202, 1.37341689387, 302.09533968580),
    (0.00000000207, 6.13936312021, 344.70304530790),
    (0.00000000228, 2.33602531859, 150.52640498110),
    (0.00000000203, 2.38070591912, 275.55052103310),
    (0.00000000194, 5.11344829813, 1215.16490244730),
    (0.00000000259, 2.78974616768, 144.14657116320),
    (0.00000000199, 3.21010368905, 7.42236354150),
    (0.00000000246, 6.15106498377, 6.21977512350),
    (0.00000000180, 4.70377036870, 518.64526483070),
    (0.00000000186, 3.85070006482, 46.20979048510),
    (0.00000000175, 3.72163733058, 150.08446199640),
    (0.00000000165, 1.87245210311, 310.17209453310),
    (0.00000000166, 3.24028819042, 173.94221952280),
    (0.00000000181, 0.39521867351, 0.96320784650),
    (0.00000000144, 1.78180338482, 531.17543780290),
    (0.00000000137, 6.20635855175, 369.45457471160),
    (0.00000000136, 4.00164375048, 526.72201967800),
    (0.00000000141, 4.02238453909, 350.33211960040),
    (0.00000000125, 5.28865037145, 329.83706636550),
    (0.00000000134, 3.97421067761, 228.79821382680),
    (0.00000000132, 4.52023845365, 148.59998928810),
    (0.00000000125, 4.24724390191, 248.72381809010),
    (0.00000000120, 4.08565783859, 154.97982310600),
    (0.00000000133, 3.16576403244, 262.47783133970),
)

B1 = (
    (0.00206366162, 4.12394311407, 74.78159856730),
    (0.00008563230, 0.33819986165, 149.56319713460),
    (0.00001725703, 2.12193159895, 73.29712585900),
    (0.00001368860, 3.06861722047, 76.26607127560),
    (0.00001374449, 0.00000000000, 0.00000000000),
    (0.00000399847, 2.84767037795, 224.34479570190),
    (0.00000450639, 3.77656180977, 1.48447270830),
    (0.00000307214, 1.25456766737, 148.07872442630),
    (0.00000154336, 3.78575467747, 63.73589830340),
    (0.00000110888, 5.32888676461, 138.51749687070),
    (0.00000112432, 5.57299891505, 151.04766984290),
    (0.00000083493, 3.59152795558, 71.81265315070),
    (0.00000055573, 3.40135416354, 85.82729883120),
    (0.00000041377, 4.45476669141, 78.71375183040),
    (0.00000053690, 1.70455769943, 77.75054398390),
    (0.00000041912, 1.21476607434, 11.04570026390),
    (0.00000031959, 3.77446207748, 222.86032299360),
    (0.00000030297, 2.56371683644, 2.96894541660),
    (0.00000026977, 5.33695500294, 213.29909543800),
    (0.00000026222, 0.41620628369, 380.12776796000),
    (0.00000020094, 5.93085633510, 529.69096509460),
    (0.00000022992, 2.48887389394, 146.59425171800),
    (0.00000019590, 5.37213500014, 299.12639426920),
    (0.00000020408, 3.70179681605, 70.84944530420),
    (0.00000019102, 1.09213276596, 111.43016149680),
    (0.00000019411, 3.83015453768, 38.13303563780),
    (0.00000010847, 2.66326308043, 3.93215326310),
    (0.00000010249, 2.31278807720, 109.94568878850),
    (0.00000009405, 2.76950513184, 39.61750834610),
    (0.00000007660, 1.81108462850, 225.82926841020),
    (0.00000008082, 4.69064168719, 184.72728735580),
    (0.00000006584, 5.50417589189, 35.16409022120),
    (0.00000007410, 1.17879753422, 65.22037101170),
    (0.00000006451, 4.98294064391, 71.60020482960),
    (0.00000006089, 1.31830108565, 52.69019803950),
    (0.00000004768, 5.90574941745, 145.63104387150),
    (0.00000004840, 4.86390682412, 221.37585028530),
    (0.00000004192, 3.29643787103, 77.96299230500),
    (0.00000004711, 4.24289069791, 152.53214255120),
    (0.00000004894, 6.01164167429, 160.60889739850),
    (0.00000003738, 4.75287390209, 70.32818044240),
    (0.00000003481, 0.64108927026, 153.49535039770),
    (0.00000003758, 3.94715595219, 351.81659230870),
    (0.00000003114, 0.10537144899, 112.91463420510),
    (0.00000002788, 4.24118032837, 74.66972398270),
    (0.00000002505, 0.04576283378, 297.64192156090),
    (0.00000002563, 4.15665405963, 305.34616939270),
    (0.00000002544, 5.25903565788, 56.62235130260),
    (0.00000002247, 4.24726481845, 36.64856292950),
    (0.00000002541, 0.40106060407, 77.22927912210),
    (0.00000002212, 2.88960413468, 277.03499374140),
    (0.00000002299, 3.57748029365, 186.21176006410),
    (0.00000002661, 0.53230319176, 79.23501669220),
    (0.00000002157, 2.10150995852, 127.47179660680),
    (0.00000002265, 1.41055702214, 4.45341812490),
    (0.00000002103, 4.27438518414, 22.09140052780),
    (0.00000001861, 3.75619999278, 145.10977900970),
    (0.00000001759, 2.10240976488, 131.40394986990),
    (0.00000001661, 4.84483054269, 62.25142559510),
    (0.00000001496, 1.72084298116, 220.41264243880),
    (0.00000001659, 5.86539712478, 454.90936652730),
    (0.00000001428, 0.31508367934, 137.03302416240),
    (0.00000001522, 1.00801468633, 75.74480641380),
    (0.00000001459, 6.17427145114, 426.59819087600),
    (0.00000001463, 5.14953143442, 84.34282612290),
    (0.00000001453, 2.22988903923, 206.18554843720),
    (0.00000001358, 5.85111427068, 183.24281464750),
    (0.00000001405, 2.43582184515, 87.31177153950),
    (0.00000001495, 5.55621838458, 67.66805156650),
    (0.00000001317, 1.91178535183, 140.00196957900),
    (0.00000001068, 1.51430678116, 373.90799283650),
    (0.00000001439, 0.99170994448, 74.89347315190),
    (0.00000001065, 4.15616015505, 288.08069400530),
    (0.00000001096, 1.63909426062, 41.10198105440),
    (0.00000001189, 0.90595784409, 33.67961751290),
    (0.00000000961, 5.48175535705, 490.33408917940),
    (0.00000000851, 0.95029849401, 909.81873305460),
    (0.00000000820, 0.78610123063, 259.50888592310),
    (0.00000000881, 4.31294603221, 9.56122755560),
    (0.00000000708, 0.00007309836, 81.89514556810),
    (0.00000000709, 3.18853632737, 80.19822453870),
    (0.00000000786, 5.18884635415, 114.39910691340),
    (0.00000000822, 0.01949759759, 18.15924726470),
    (0.00000000656, 6.16899483115, 96.87299909510),
    (0.00000000879, 1.82006610038, 73.81839072080),
    (0.00000000872, 0.30134022304, 12.53017297220),
    (0.00000000860, 0.21225398802, 3.18139373770),
    (0.00000000637, 2.64378420008, 75.30286342910),
    (0.00000000727, 0.02846968582, 66.70484372000),
    (0.00000000600, 4.42462853209, 415.55249061210),
    (0.00000000590, 4.17885957237, 300.61086697750),
    (0.00000000610, 6.07202921132, 219.89137757700),
    (0.00000000611, 0.97629869063, 296.15744885260),
    (0.00000000635, 2.21125075603, 74.26033370550),
    (0.00000000529, 2.35940463062, 7.11354700080),
    (0.00000000622, 2.21801944850, 211.81462272970),
    (0.00000000519, 2.01872911223, 142.44965013380),
    (0.00000000489, 1.83419944488, 92.94084583200),
    (0.00000000445, 2.51784247184, 604.47256366190),
    (0.00000000413, 5.36482818305, 82.85835341460),
    (0.00000000445, 0.33164113115, 227.31374111850),
    (0.00000000456, 2.44190834824, 381.61224066830),
    (0.00000000378, 1.91873737843, 202.25339517410),
    (0.00000000509, 5.83556856314, 191.20769491020),
    (0.00000000455, 5.15414537021, 522.57741809380),
    (0.00000000419, 2.80644155875, 72.33391801250),
    (0.00000000333, 0.32014837950, 2.44768055480),
    (0.00000000360, 1.47248643716, 378.64329525170),
    (0.00000000306, 0.15517399606, 159.12442469020),
    (0.00000000301, 4.46417652272, 536.80451209540),
    (0.00000000353, 0.48749845867, 128.95626931510),
    (0.00000000351, 6.24769322491, 5.93789083320),
    (0.00000000298, 1.71815652029, 235.39049596580),
    (0.00000000315, 2.44922921309, 187.69623277240),
    (0.00000000318, 0.70176359510, 181.75834193920),
    (0.00000000314, 4.68400251693, 14.97785352700),
    (0.00000000282, 3.70093718573, 108.46121608020),
    (0.00000000272, 3.91340553608, 617.80588578620),
    (0.00000000273, 3.29483889428, 387.24131496080),
    (0.00000000323, 4.90410549341, 258.02441321480),
    (0.00000000288, 4.42249612833, 195.13984817330),
    (0.00000000250, 1.23231297183, 703.63318461740),
    (0.00000000338, 2.84645768890, 154.01661525950),
    (0.00000000297, 1.16538119842, 146.38180339690),
    (0.00000000248, 4.90614051989, 41.64449777560),
    (0.00000000275, 5.35665949805, 80.71948940050),
    (0.00000000257, 1.82441994046, 230.56457082540),
    (0.00000000234, 0.27679874465, 33.13710079170),
    (0.00000000280, 1.73679618032, 265.98929347750),
    (0.00000000229, 0.49529839431, 74.82978267710),
    (0.00000000229, 4.18462288684, 74.73341445750),
    (0.00000000253, 2.63817804331, 74.52096613640),
    (0.00000000252, 2.04143912495, 75.04223099820),
    (0.00000000213, 4.16218259902, 74.62153987290),
    (0.00000000212, 0.51761494342, 74.94165726170),
    (0.00000000201, 4.54140547837, 20.60692781950),
    (0.00000000194, 4.17282454759, 116.42609634290),
    (0.00000000213, 2.29528235429, 32.19514480460),
    (0.00000000174, 3.15418942153, 228.27694896500),
    (0.00000000194, 0.06960211137, 42.58645376270),
    (0.00000000173, 5.59700344643, 68.84370773410),
    (0.00000000159, 4.91721631097, 143.62530630140),
    (0.00000000150, 0.92771324396, 404.50679034820),
    (0.00000000136, 2.51083022906, 372.42352012820),
    (0.00000000134, 3.22507836958, 479.28838891550),
    (0.00000000124, 0.42063711585, 149.45132255000),
    (0.00000000122, 1.20639876458, 5.41662597140),
    (0.00000000119, 0.45375065997, 74.03083904190),
    (0.00000000146, 5.08207330360, 294.67297614430),
    (0.00000000118, 4.22640788890, 75.53235809270),
    (0.00000000118, 1.50613822829, 344.70304530790),
    (0.00000000121, 2.13544759505, 209.36694217490),
    (0.00000000121, 6.08239076370, 260.99335863140),
    (0.00000000154, 4.18369977366, 39.35687591520),
)

B2 = (
    (0.00009211656, 5.80044305785, 74.78159856730),
    (0.00000556926, 0.00000000000, 0.00000000000),
    (0.00000286265, 2.17729776353, 149.56319713460),
    (0.00000094969, 3.84237569809, 73.29712585900),
    (0.00000045419, 4.87822046064, 76.26607127560),
    (0.00000020107, 5.46264485369, 1.48447270830),
    (0.00000014793, 0.87983715652, 138.51749687070),
    (0.00000013963, 5.07234043994, 63.73589830340),
    (0.00000014261, 2.84517742687, 148.07872442630),
    (0.00000010122, 5.00290894862, 224.34479570190),
    (0.00000008299, 6.26655615197, 78.71375183040),
    (0.00000004729, 5.16274174929, 71.81265315070),
    (0.00000003816, 6.28224514574, 85.82729883120),
    (0.00000003488, 3.53472172445, 11.04570026390),
    (0.00000002555, 1.44444215715, 151.04766984290),
    (0.00000002353, 4.23069776466, 3.93215326310),
    (0.00000002585, 0.41383633246, 71.60020482960),
    (0.00000001394, 4.13126838571, 146.59425171800),
    (0.00000001183, 3.68471361409, 77.75054398390),
    (0.00000001103, 5.54212014132, 222.86032299360),
    (0.00000001205, 5.05109252937, 380.12776796000),
    (0.00000001146, 1.95280464754, 529.69096509460),
    (0.00000000977, 1.52652616357, 77.96299230500),
    (0.00000001025, 4.33698643491, 2.96894541660),
    (0.00000000858, 2.78728745263, 111.43016149680),
    (0.00000000868, 5.55175791193, 38.13303563780),
    (0.00000000633, 0.41074353315, 213.29909543800),
    (0.00000000596, 5.39265533517, 127.47179660680),
    (0.00000000586, 4.00404667232, 109.94568878850),
    (0.00000000543, 2.40369406419, 153.49535039770),
    (0.00000000486, 2.05237757516, 299.12639426920),
    (0.00000000557, 3.13408880388, 65.22037101170),
    (0.00000000457, 3.96543219832, 454.90936652730),
    (0.00000000481, 2.81511187371, 160.60889739850),
    (0.00000000421, 2.16819778071, 56.62235130260),
    (0.00000000326, 4.52920012430, 39.61750834610),
    (0.00000000308, 6.26508780547, 70.32818044240),
    (0.00000000338, 5.14594268587, 3.18139373770),
    (0.00000000288, 0.47061435406, 22.09140052780),
    (0.00000000336, 4.23512034174, 35.16409022120),
    (0.00000000316, 3.93430525759, 52.69019803950),
    (0.00000000306, 1.10359318443, 70.84944530420),
    (0.00000000250, 3.58780257084, 202.25339517410),
    (0.00000000239, 4.77679306080, 87.31177153950),
    (0.00000000227, 2.74138067839, 12.53017297220),
    (0.00000000263, 1.59203582407, 84.34282612290),
    (0.00000000215, 3.88195737361, 131.40394986990),
    (0.00000000216, 5.80700510713, 74.66972398270),
    (0.00000000264, 1.82574036051, 77.22927912210),
    (0.00000000222, 0.04111883550, 184.72728735580),
    (0.00000000197, 1.56602555362, 9.56122755560),
    (0.00000000193, 2.26416938160, 75.74480641380),
    (0.00000000179, 2.69065316892, 145.63104387150),
    (0.00000000170, 2.75844544119, 73.81839072080),
    (0.00000000155, 3.55393249110, 18.15924726470),
    (0.00000000174, 4.76111441901, 277.03499374140),
    (0.00000000140, 0.28714762870, 221.37585028530),
    (0.00000000134, 1.29065526326, 206.18554843720),
    (0.00000000127, 6.17908901556, 62.25142559510),
    (0.00000000116, 6.26646620658, 220.41264243880),
)

B3 = (
    (0.00000267832, 1.25097888291, 74.78159856730),
    (0.00000011048, 3.14159265359, 0.00000000000),
    (0.00000006154, 4.00663614486, 149.56319713460),
    (0.00000003361, 5.77804694935, 73.29712585900),
    (0.00000001602, 1.05657834344, 63.73589830340),
    (0.00000001265, 1.66795295537, 78.71375183040),
    (0.00000001183, 2.58856450374, 138.51749687070),
    (0.00000001087, 0.28687213135, 76.26607127560),
    (0.00000000640, 1.87238784591, 71.60020482960),
    (0.00000000590, 0.80206040001, 1.48447270830),
    (0.00000000467, 4.42872012006, 148.07872442630),
    (0.00000000272, 4.00684090176, 85.82729883120),
    (0.00000000203, 0.60406901282, 71.81265315070),
    (0.00000000180, 5.55657564049, 3.93215326310),
    (0.00000000168, 4.67745630044, 70.84944530420),
    (0.00000000170, 2.93672195979, 11.04570026390),
)

B4 = (
    (0.00000005719, 2.85499529315, 74.78159856730),
    (0.00000000300, 3.14159265359, 0.00000000000),
)

R0 = (
    (19.21264847881, 0.00000000000, 0.00000000000),
    (0.88784984055, 5.60377526994, 74.78159856730),
    (0.03440835545, 0.32836098991, 73.29712585900),
    (0.02055653495, 1.78295170028, 149.56319713460),
    (0.00649321851, 4.52247298119, 76.26607127560),
    (0.00602248144, 3.86003820462, 63.73589830340),
    (0.00496404171, 1.40139934716, 454.90936652730),
    (0.00338525522, 1.58002682946, 138.51749687070),
    (0.00243508222, 1.57086595074, 71.81265315070),
    (0.00190521915, 1.99809364502, 1.48447270830),
    (0.00161858251, 2.79137863469, 148.07872442630),
    (0.00143705902, 1.38368574483, 11.04570026390),
    (0.00093192359, 0.17437193645, 36.64856292950),
    (0.00071424265, 4.24509327405, 224.34479570190),
    (0.00089805842, 3.66105366329, 109.94568878850),
    (0.00039009624, 1.66971128869, 70.84944530420),
    (0.00046677322, 1.39976563936, 35.16409022120),
    (0.00039025681, 3.36234710692, 277.03499374140),
    (0.00036755160, 3.88648934736, 146.59425171800),
    (0.00030348875, 0.70100446346, 151.04766984290),
    (0.00029156264, 3.18056174556, 77.75054398390),
    (0.00020471584, 1.55588961500, 202.25339517410),
    (0.00025620360, 5.25656292802, 380.12776796000),
    (0.00025785805, 3.78537741503, 85.82729883120),
    (0.00022637152, 0.72519137745, 529.69096509460),
    (0.00020473163, 2.79639811626, 70.32818044240),
    (0.00017900561, 0.55455488605, 2.96894541660),
    (0.00012328151, 5.96039150918, 127.47179660680),
    (0.00014701566, 4.90434406648, 108.46121608020),
    (0.00011494701, 0.43774027872, 65.22037101170),
    (0.00015502809, 5.35405037603, 38.13303563780),
    (0.00010792699, 1.42104858472, 213.29909543800),
    (0.00011696085, 3.29825599114, 3.93215326310),
    (0.00011959355, 1.75044072173, 984.60033162190),
    (0.00012896507, 2.62154018241, 111.43016149680),
    (0.00011852996, 0.99342814582, 52.69019803950),
    (0.00009111446, 4.99638600045, 62.25142559510),
    (0.00008420550, 5.25350716616, 222.86032299360),
    (0.00007449125, 0.79491905956, 351.81659230870),
    (0.00008402147, 5.03877516489, 415.55249061210),
    (0.00006046370, 5.67960948357, 78.71375183040),
    (0.00005524133, 3.11499484161, 9.56122755560),
    (0.00007329454, 3.97277527840, 183.24281464750),
    (0.00005444878, 5.10575635361, 145.10977900970),
    (0.00005238103, 2.62960141797, 33.67961751290),
    (0.00004079167, 3.22064788674, 340.77089204480),
    (0.00003801606, 6.10985558505, 184.72728735580),
    (0.00003919476, 4.25015288873, 39.61750834610),
    (0.00002940492, 2.14637460319, 137.03302416240),
    (0.00003781219, 3.45840272873, 456.39383923560),
    (0.00002942239, 0.42393808854, 299.12639426920),
    (0.00003686787, 2.48718116535, 453.42489381900),
    (0.00003101743, 4.14031063896, 219.89137757700),
    (0.00002962641, 0.82977991995, 56.62235130260),
    (0.00002937799, 3.67657450930, 140.00196957900),
    (0.00002865128, 0.30996903761, 12.53017297220),
    (0.00002538032, 4.85457831993, 131.40394986990),
    (0.00001962510, 5.24342224065, 84.34282612290),
    (0.00002363550, 0.44253328372, 554.06998748280),
    (0.00001979394, 6.12836181686, 106.97674337190),
    (0.00002182572, 2.94040431638, 305.34616939270),
    (0.00001962974, 0.04114739120, 221.37585028530),
    (0.00001829560, 4.01105771632, 68.84370773410),
    (0.00001642920, 0.35564102554, 67.66805156650),
    (0.00001584850, 3.16267171762, 225.82926841020),
    (0.00001848655, 2.91111759376, 909.81873305460),
    (0.00001632430, 4.23061792837, 22.09140052780),
    (0.00001401390, 1.39084023521, 265.98929347750),
    (0.00001403717, 5.63563637532, 4.45341812490),
    (0.00001655866, 1.96431297431, 79.23501669220),
    (0.00001248978, 5.44027380866, 54.17467074780),
    (0.00001563447, 1.47917835549, 112.91463420510),
    (0.00001248054, 4.88984353601, 479.28838891550),
    (0.00001197439, 2.52185744943, 145.63104387150),
    (0.00001506952, 5.24186185583, 181.75834193920),
    (0.00001481746, 5.66203046912, 152.53214255120),
    (0.00001438838, 1.53046287618, 447.79581952650),
    (0.00001408514, 4.41921749601, 462.02291352810),
    (0.00001477112, 4.32214690647, 256.53994050650),
    (0.00001228314, 5.97703331040, 59.80374504030),
    (0.00001249958, 6.24484546141, 160.60889739850),
    (0.00000906468, 5.62025869483, 74.66972398270),
    (0.00001090681, 4.15393813845, 77.96299230500),
    (0.00000844931, 0.12943398585, 82.85835341460),
    (0.00000900363, 2.37315925843, 74.89347315190),
    (0.00001071957, 1.74286714339, 528.20649238630),
    (0.00000689708, 3.08097059985, 69.36497259590),
    (0.00000593798, 4.50074517056, 8.07675484730),
    (0.00000718559, 4.00047509264, 128.95626931510),
    (0.00000699574, 0.03987168068, 143.62530630140),
    (0.00000575656, 5.89552672641, 66.70484372000),
    (0.00000759004, 2.13700057433, 692.58748435350),
    (0.00000710449, 5.41605755095, 218.40690486870),
    (0.00000548672, 5.62811496970, 3.18139373770),
    (0.00000651632, 4.42340061551, 18.15924726470),
    (0.00000539825, 6.20788667166, 71.60020482960),
    (0.00000544539, 5.69375108253, 203.73786788240),
    (0.00000710276, 4.21967260022, 381.61224066830),
    (0.00000593819, 3.83805798523, 32.19514480460),
    (0.00000710134, 4.48972171999, 293.18850343600),
    (0.00000705482, 0.45521177725, 835.03713448730),
    (0.00000588000, 5.08252923316, 186.21176006410),
    (0.00000598231, 0.35815291076, 269.92144674060),
    (0.00000641914, 2.71127457036, 87.31177153950),
    (0.00000495621, 2.65094755989, 200.76892246580),
    (0.00000630252, 4.46146214548, 275.55052103310),
    (0.00000575195, 5.57862480486, 2.44768055480),
    (0.00000569870, 1.63930932740, 77.22927912210),
    (0.00000556672, 1.07231961344, 1059.38193018920),
    (0.00000449439, 0.27981733949, 617.80588578620),
    (0.00000463608, 1.43448297993, 297.64192156090),
    (0.00000436547, 0.52802035072, 209.36694217490),
    (0.00000463938, 2.35443114417, 211.81462272970),
    (0.00000435943, 2.10077211065, 1514.29129671650),
    (0.00000515534, 3.23274579379, 284.14854074220),
    (0.00000454879, 4.08364210459, 99.16062095550),
    (0.00000477430, 2.89397217998, 39.35687591520),
    (0.00000542331, 5.39481705077, 278.51946644970),
    (0.00000410087, 3.04968860441, 404.50679034820),
    (0.00000367848, 0.71159607058, 125.98732389850),
    (0.00000503096, 5.83931251717, 191.20769491020),
    (0.00000487532, 0.06402454583, 60.76695288680),
    (0.00000455043, 2.59321186669, 490.33408917940),
    (0.00000436291, 2.08183813746, 51.20572533120),
    (0.00000435803, 2.79445203085, 75.74480641380),
    (0.00000323546, 4.82899980859, 195.13984817330),
    (0.00000359363, 0.00868012078, 35.42472265210),
    (0.00000429314, 3.08031550488, 41.10198105440),
    (0.00000320021, 5.48625497747, 14.97785352700),
    (0.00000414331, 0.09012800478, 258.02441321480),
    (0.00000379715, 0.05832815311, 378.64329525170),
    (0.00000420062, 2.25393983318, 81.00137369080),
    (0.00000357721, 4.71414305625, 173.94221952280),
    (0.00000358922, 0.35213227553, 426.59819087600),
    (0.00000405410, 6.12263257999, 24.37902238820),
    (0.00000365158, 5.59483211224, 255.05546779820),
    (0.00000308102, 3.92355394354, 116.42609634290),
    (0.00000325660, 4.71996698332, 134.58534360760),
    (0.00000292781, 3.99521194830, 72.33391801250),
    (0.00000386543, 0.68619006966, 230.56457082540),
    (0.00000305686, 3.76108783519, 344.70304530790),
    (0.00000286972, 1.84990335310, 153.49535039770),
    (0.00000353640, 4.65717995107, 329.83706636550),
    (0.00000302051, 0.13190003806, 565.11568774670),
    (0.00000241128, 1.60454142389, 81.37388070630),
    (0.00000249829, 4.24205256241, 75.30286342910),
    (0.00000245063, 5.94905404273, 20.60692781950),
    (0.00000248277, 1.06282887181, 105.49227066360),
    (0.00000305353, 2.55534744586, 6208.29425142410),
    (0.00000296328, 4.21100245276, 1364.72809958190),
    (0.00000219938, 2.96119055727, 120.35824960600),
    (0.00000233564, 2.97074409938, 46.20979048510),
    (0.00000262422, 3.83652250971, 831.10498122420),
    (0.00000233546, 4.48117006140, 628.85158605010),
    (0.00000187432, 3.03529190348, 135.54855145410),
    (0.00000216776, 3.42907414802, 241.61027108930),
    (0.00000255760, 1.16707893460, 177.87437278590),
    (0.00000220458, 0.19633492290, 180.27386923090),
    (0.00000224519, 0.40677777819, 114.39910691340),
    (0.00000205398, 2.30380942634, 259.50888592310),
    (0.00000211106, 4.93079982424, 103.09277421860),
    (0.00000175758, 5.50822822216, 7.11354700080),
    (0.00000188512, 2.23588941288, 5.41662597140),
    (0.00000171718, 5.21730232334, 41.64449777560),
    (0.00000176136, 1.95958319897, 756.32338265690),
    (0.00000170447, 4.94978757413, 206.18554843720),
    (0.00000169454, 4.04319823722, 55.65914345610),
    (0.00000219015, 0.24790282027, 294.67297614430),
    (0.00000187768, 2.04538775456, 408.43894361130),
    (0.00000182258, 0.70728384467, 391.17346822390),
    (0.00000192095, 5.76718231319, 291.70403072770),
    (0.00000153684, 4.70659406659, 543.02428721890),
    (0.00000170043, 4.50995820508, 288.08069400530),
    (0.00000164097, 5.22527540372, 67.35923502580),
    (0.00000194341, 6.11690364710, 414.06801790380),
    (0.00000168027, 5.25810639105, 518.64526483070),
    (0.00000156641, 0.66304836778, 220.41264243880),
    (0.00000182330, 0.78383856974, 417.03696332040),
    (0.00000167462, 4.92241597775, 422.66603761290),
    (0.00000170770, 2.30927162659, 98.89998852460),
    (0.00000161678, 3.27259601116, 443.86366626340),
    (0.00000132763, 2.88875442023, 373.90799283650),
    (0.00000161140, 3.82341391177, 451.94042111070),
    (0.00000179292, 4.82405681293, 366.48562929500),
    (0.00000178153, 3.98026039043, 10138.50394764370),
    (0.00000141929, 1.26972581554, 159.12442469020),
    (0.00000153750, 4.27847681414, 45.57665103870),
    (0.00000161513, 4.99545008738, 73.81839072080),
    (0.00000146315, 2.65664902119, 465.95506679120),
    (0.00000124875, 4.30470898895, 339.28641933650),
    (0.00000154620, 4.32046228120, 760.25553592000),
    (0.00000142894, 2.07773752143, 457.87831194390),
    (0.00000152408, 4.64742446768, 155.78297225810),
    (0.00000116389, 4.43513730944, 5.93789083320),
    (0.00000113444, 4.65351596266, 80.19822453870),
    (0.00000107611, 3.77290419929, 142.44965013380),
    (0.00000133740, 5.30894739047, 14.01464568050),
    (0.00000116104, 2.51182725670, 296.15744885260),
    (0.00000129106, 0.36277717661, 96.87299909510),
    (0.00000122766, 2.38341351026, 141.48644228730),
    (0.00000101368, 1.05739625315, 92.30770638560),
    (0.00000114669, 6.24863527978, 767.36908292080),
    (0.00000113283, 0.83051319425, 100.38446123290),
    (0.00000107199, 2.39365512354, 347.88443904560),
    (0.00000095443, 0.80094579583, 342.25536475310),
    (0.00000110789, 0.38651051525, 216.92243216040),
    (0.00000126978, 0.42359358250, 331.32153907380),
    (0.00000112635, 0.08107814739, 558.00214074590),
    (0.00000103166, 0.69792283389, 358.93013930950),
    (0.00000111474, 0.75023459027, 80.71948940050),
    (0.00000090902, 5.16530481614, 144.14657116320),
    (0.00000090677, 0.22036476597, 333.65734504400),
    (0.00000098568, 4.33164222339, 74.52096613640),
    (0.00000089306, 2.18851161761, 74.82978267710),
    (0.00000117216, 3.94965784596, 74.26033370550),
    (0.00000089088, 5.87783179087, 74.73341445750),
    (0.00000097316, 0.69429695020, 977.48678462110),
    (0.00000116587, 1.83677031994, 1289.94650101460),
    (0.00000085449, 5.80255966149, 6.59228213900),
    (0.00000086823, 5.61973473261, 300.61086697750),
    (0.00000105226, 5.94513614941, 328.35259365720),
    (0.00000112117, 1.21168089807, 329.72519178090),
    (0.00000082982, 2.20797412496, 74.94165726170),
    (0.00000094345, 4.53937998713, 28.57180808220),
    (0.00000106847, 1.82071328579, 306.83064210100),
    (0.00000103572, 2.99368274596, 6.21977512350),
    (0.00000106357, 0.81583874750, 1087.69310584050),
    (0.00000077728, 2.73390123734, 110.20632121940),
    (0.00000098405, 3.73478182667, 75.04223099820),
    (0.00000086231, 2.83316881064, 983.11585891360),
    (0.00000089023, 4.73754458960, 604.47256366190),
    (0.00000083013, 1.88273535999, 387.24131496080),
    (0.00000090227, 3.80367274711, 986.08480433020),
    (0.00000084598, 1.25774132938, 142.14083359310),
    (0.00000074690, 1.35097482767, 350.33211960040),
    (0.00000095770, 5.54845504768, 969.62247809490),
    (0.00000090277, 0.36773710508, 0.96320784650),
    (0.00000082748, 5.85590525764, 74.62153987290),
    (0.00000075828, 2.78019216029, 88.11492069160),
    (0.00000083850, 1.84386358668, 227.31374111850),
    (0.00000070705, 4.65567024014, 44.72531777680),
    (0.00000071322, 3.64963906751, 894.84087952760),
    (0.00000094141, 4.98819201726, 403.13419222450),
    (0.00000088966, 4.43895583278, 154.01661525950),
    (0.00000079436, 5.66662613679, 267.47376618580),
    (0.00000075615, 5.40971072536, 50.40257617910),
    (0.00000068583, 4.76679841388, 991.71387862270),
    (0.00000065256, 0.69286370395, 152.74459087230),
    (0.00000063031, 2.89946567712, 79.88940799800),
    (0.00000063878, 0.09820555288, 681.54178408960),
    (0.00000080101, 2.97520561915, 526.72201967800),
    (0.00000069693, 3.95281159807, 187.69623277240),
    (0.00000059492, 3.59642351692, 58.10682401090),
    (0.00000059273, 0.50930692071, 28.31117565130),
    (0.00000068590, 2.41880311530, 235.39049596580),
    (0.00000066007, 5.04558399435, 30.71067209630),
    (0.00000070223, 3.73647415486, 546.95644048200),
    (0.00000066836, 0.85506033017, 522.57741809380),
    (0.00000063027, 0.29269109052, 119.50691634410),
    (0.00000062023, 2.31557510311, 74.03083904190),
    (0.00000071379, 3.16967571102, 23.57587323610),
    (0.00000074827, 5.36812537961, 373.01422095920),
    (0.00000064204, 2.36817149460, 157.63995198190),
    (0.00000070712, 0.55830476304, 92.94084583200),
    (0.00000055762, 5.27011035858, 874.39401040250),
    (0.00000075638, 4.66344127677, 101.86893394120),
    (0.00000073727, 6.20581665991, 312.45971639350),
    (0.00000072940, 0.58406607757, 367.97010200330),
    (0.00000053230, 2.24728742995, 17.52610781830),
    (0.00000063139, 4.59563922296, 67.88049988760),
    (0.00000060550, 0.57591315857, 253.57099508990),
    (0.00000052946, 2.45947017614, 264.50482076920),
    (0.00000070236, 1.51860943454, 552.58551477450),
    (0.00000068624, 2.44507780453, 555.55446019110),
    (0.00000062796, 0.33786296181, 561.18353448360),
    (0.00000049009, 1.09233728279, 19.12245511120),
    (0.00000064636, 5.27469970900, 68.18931642830),
    (0.00000062957, 5.35891188483, 92.04707395470),
    (0.00000047664, 3.90924952181, 192.69216761850),
    (0.00000065279, 4.23629510074, 771.30123618390),
    (0.00000065190, 3.73942854797, 536.80451209540),
    (0.00000059452, 6.10554259948, 365.00115658670),
    (0.00000052153, 1.71734604937, 905.88657979150),
    (0.00000046035, 3.87093684776, 210.33015002140),
    (0.00000046429, 5.97423131576, 477.80391620720),
    (0.00000062115, 2.67544358037, 130.44074202340),
    (0.00000046038, 3.89378239085, 48.75804477640),
    (0.00000042663, 3.81519760715, 61.28821774860),
    (0.00000053909, 2.86457147106, 353.30106501700),
    (0.00000046936, 1.00011046774, 166.82867252200),
    (0.00000042217, 2.61748790314, 90.82323367730),
    (0.00000043324, 4.15777895713, 173.68158709190),
    (0.00000041296, 1.79930408254, 149.45132255000),
    (0.00000044960, 1.76623306927, 0.52126486180),
    (0.00000051904, 2.97773319756, 383.09671337660),
    (0.00000042931, 1.57416456203, 120.99138905240),
    (0.00000049611, 4.03427920470, 303.86169668440),
    (0.00000045263, 3.58382163089, 97.41551581630),
    (0.00000038695, 2.39404211169, 31.49256938900),
    (0.00000038072, 5.79473670350, 75.53235809270),
    (0.00000050126, 4.76412907201, 911.30320576290),
    (0.00000050884, 5.15513957132, 439.78275515400),
    (0.00000043148, 0.84999004804, 58.31927233200),
    (0.00000042732, 5.17318058934, 162.09337010680),
    (0.00000050298, 5.81603435915, 66.91729204110),
    (0.00000035639, 1.87447823723, 472.17484191470),
    (0.00000049963, 1.88943490790, 42.58645376270),
    (0.00000039974, 1.74262050679, 89.75945209430),
    (0.00000045252, 1.92511912328, 55.13787859430),
    (0.00000044896, 1.48355901890, 450.97721326420),
    (0.00000034297, 5.20257496546, 316.39186965660),
    (0.00000046355, 0.33942039181, 273.10284047830),
    (0.00000037152, 2.03757941865, 117.91056905120),
    (0.00000046106, 5.62315633955, 1819.63746610920),
    (0.00000039368, 4.19402806344, 486.40193591630),
    (0.00000041039, 4.82994471947, 149.67507171920),
    (0.00000044959, 0.72694662195, 3265.83082813250),
    (0.00000043617, 0.75332422672, 404.61866493280),
    (0.00000031823, 3.84768075667, 20.44686912510),
    (0.00000044196, 4.36769721266, 418.26080359780),
    (0.00000037900, 3.02928044053, 167.08930495290),
    (0.00000043684, 1.57328182739, 491.55792945680),
    (0.00000034004, 1.26257052908, 260.99335863140),
    (0.00000031276, 4.16123711648, 13.33332212430),
    (0.00000039984, 2.86626125620, 468.24268865160),
    (0.00000036490, 2.58804294589, 68.56182344380),
    (0.00000032364, 3.11577354875, 103.35340664950),
    (0.00000033857, 0.15592410716, 24.11838995730),
    (0.00000035933, 1.36784550071, 59.28248017850),
    (0.00000033633, 0.75501177400, 290.21955801940),
    (0.00000029751, 5.33178627038, 1033.35837639830),
    (0.00000032036, 4.67549858000, 205.22234059070),
    (0.00000030991, 4.62823866461, 258.87574647670),
    (0.00000035268, 1.00718464327, 1108.13997496560),
    (0.00000033366, 3.40738625377, 43.12897048390),
    (0.00000032638, 5.25485850258, 114.13847448250),
    (0.00000029825, 5.64157476876, 254.94359321360),
    (0.00000031613, 3.78231393110, 152.01087768940),
    (0.00000030980, 2.26660677937, 104.00779795530),
    (0.00000034591, 5.17326577255, 25.60286266560),
    (0.00000028398, 1.76872790446, 820.05928096030),
    (0.00000027991, 3.92486885309, 199.28444975750),
    (0.00000028986, 2.58171811759, 76.47851959670),
    (0.00000033772, 5.79359878723, 274.06604832480),
    (0.00000029401, 5.93638676504, 280.96714700450),
    (0.00000031094, 1.39352495971, 178.78939652260),
    (0.00000030118, 0.44367887423, 27.08733537390),
    (0.00000033820, 6.26168443513, 401.64971951620),
    (0.00000027513, 2.15194454461, 480.77286162380),
    (0.00000026880, 2.51300272780, 123.53964334370),
    (0.00000026139, 0.21985367371, 286.59622129700),
    (0.00000026455, 3.88229792258, 372.42352012820),
    (0.00000033974, 1.44637843871, 88.79624424780),
    (0.00000030107, 0.82723915882, 100.64509366380),
    (0.00000027715, 4.64827434185, 198.32124191100),
    (0.00000033687, 1.14348201049, 82.48584639910),
    (0.00000026493, 1.97889544238, 95.38852638680),
    (0.00000024355, 2.37839176150, 146.38180339690),
    (0.00000026590, 0.39881920389, 106.01353552540),
    (0.00000027006, 2.10206230691, 1057.89745748090),
    (0.00000023976, 6.21233637686, 16.67477455640),
    (0.00000030970, 5.34005431547, 476.43131808350),
    (0.00000024073, 3.42953641968, 1044.40407666220),
    (0.00000027023, 0.71284764471, 248.72381809010),
    (0.00000029098, 3.99184722502, 908.33426034630),
    (0.00000022862, 2.26978781393, 175.16605980020),
    (0.00000024026, 0.36584131268, 73.18525127440),
    (0.00000028024, 3.46485782266, 1439.50969814920),
    (0.00000022034, 0.05163807300, 33.13710079170),
    (0.00000022185, 5.32252126255, 483.22054217860),
    (0.00000021027, 0.37224660652, 214.78356814630),
    (0.00000020548, 1.80004483299, 118.02244363580),
    (0.00000027835, 4.12412553530, 694.07195706180),
    (0.00000025500, 5.49632191634, 115.88357962170),
    (0.00000021377, 3.89179204956, 66.18357885820),
    (0.00000027201, 5.76148797900, 1215.16490244730),
    (0.00000024984, 0.65339418015, 132.88842257820),
    (0.00000023976, 4.56161326826, 458.84151979040),
    (0.00000021116, 1.13610706250, 60.55450456570),
    (0.00000026263, 2.77532723118, 490.07345674850),
    (0.00000026369, 3.37120039300, 49.72125262290),
    (0.00000022870, 4.53135637620, 78.40493528970),
    (0.00000026872, 3.26037129303, 691.10301164520),
    (0.00000025004, 3.65018677651, 73.40900044360),
    (0.00000020874, 3.92589972978, 134.06407874580),
    (0.00000020915, 5.53955400138, 129.91947716160),
    (0.00000023067, 2.56806856688, 332.80601178210),
    (0.00000022630, 5.02721554401, 150.52640498110),
    (0.00000019123, 1.92386327535, 124.50285119020),
    (0.00000020678, 0.98302410602, 29.20494752860),
    (0.00000018755, 1.07911898422, 70.11573212130),
    (0.00000019458, 1.33847349577, 616.32141307790),
    (0.00000023071, 3.93152899657, 43.28902917830),
    (0.00000023313, 0.61185525008, 189.72322220190),
    (0.00000019660, 1.40884902649, 1589.07289528380),
    (0.00000024990, 0.91842956919, 441.26722786230),
    (0.00000023555, 0.02127675886, 593.42686339800),
    (0.00000018288, 4.55111843462, 165.60483224460),
    (0.00000020980, 0.88504201898, 326.86812094890),
    (0.00000024940, 4.63470443286, 162.89651925890),
    (0.00000018941, 5.10763304564, 81.89514556810),
    (0.00000018911, 1.23351635328, 13.49338081870),
    (0.00000017358, 4.05768226252, 403.02231763990),
    (0.00000017362, 5.28607227640, 7.86430652620),
    (0.00000022513, 3.15059891398, 419.74527630610),
    (0.00000021237, 2.14856256664, 75.58474771940),
    (0.00000017845, 2.54349200329, 47.06112374700),
    (0.00000016995, 2.48647736969, 2043.98226181110),
    (0.00000023676, 5.80355919955, 232.04904353370),
    (0.00000022639, 2.07623129509, 699.70103135430),
    (0.00000019261, 1.56494156016, 425.11371816770),
    (0.00000021067, 5.30844438236, 237.67811782620),
    (0.00000022733, 0.28303126440, 0.11187458460),
    (0.00000016372, 3.45984005656, 0.75075952540),
    (0.00000021213, 0.95828006612, 405.99126305650),
    (0.00000018033, 1.60723214246, 215.43795945210),
    (0.00000016267, 4.89002016360, 69.15252427480),
    (0.00000021738, 3.24738839789, 1744.85586754190),
    (0.00000016149, 0.35803995032, 77.06922042770),
    (0.00000021710, 0.88800040769, 344.96367773880),
    (0.00000017204, 6.04366142241, 32.24332891440),
    (0.00000017883, 4.01076173641, 280.00393915800),
    (0.00000015918, 2.96623390816, 25.86349509650),
    (0.00000014769, 3.73887340623, 610.69233878540),
    (0.00000015033, 4.24825484707, 228.27694896500),
    (0.00000015586, 5.07987082740, 114.94162363460),
    (0.00000015392, 0.22971106129, 17.26547538740),
    (0.00000015354, 0.25482391126, 661.09491496450),
    (0.00000014617, 1.13349626273, 823.99143422340),
    (0.00000016232, 3.43499743810, 147.11551657980),
    (0.00000014654, 1.68288566884, 207.88246946660),
    (0.00000017682, 5.94376629143, 624.91943278700),
    (0.00000018837, 1.38335408070, 377.15882254340),
    (0.00000015425, 1.66489033237, 440.68227252570),
    (0.00000014764, 4.41710614445, 16.46232623530),
    (0.00000014402, 0.41359448817, 142.66209845490),
    (0.00000016992, 0.16042368544, 438.29828244570),
    (0.00000013268, 3.04634728126, 668.20846196530),
    (0.00000016460, 0.92068542861, 369.08206769610),
    (0.00000017239, 4.51659246818, 606.76018552230),
    (0.00000013238, 0.13650358961, 216.48048917570),
    (0.00000015832, 4.94315562971, 124.29040286910),
    (0.00000014374, 2.93700606008, 419.48464387520),
    (0.00000012927, 1.65950183061, 54.33472944220),
    (0.00000014224, 4.42286781619, 47.69426319340),
    (0.00000012753, 0.03020931725, 217.23124870110),
    (0.00000014792, 1.08447500622, 49.50880430180),
    (0.00000014031, 3.68785757687, 16.04163511000),
    (0.00000013709, 4.78890618802, 72.77586099720),
    (0.00000013073, 1.54064778942, 218.92816973050),
    (0.00000017474, 5.05621281434, 564.85505531580),
    (0.00000012686, 3.44640888880, 958.57677783100),
    (0.00000013035, 0.56445754615, 1171.87587326900),
    (0.00000012458, 3.29187197133, 902.70518605380),
    (0.00000011893, 1.41294011193, 55.77101804070),
    (0.00000015018, 3.43209569509, 19.01058052660),
    (0.00000016470, 2.04067754807, 411.62033734900),
    (0.00000015619, 1.53464600544, 833.55266177900),
    (0.00000015678, 5.92839374034, 778.41478318470),
    (0.00000012039, 5.17748353434, 135.33610313300),
    (0.00000015523, 3.54656631824, 113.87784205160),
    (0.00000014364, 4.19825110964, 89.33876096900),
    (0.00000015424, 2.12697366269, 106.27416795630),
    (0.00000011957, 1.43314130608, 455.87257437380),
    (0.00000015938, 5.49575810978, 513.07988101300),
    (0.00000013532, 4.11463529983, 95.22846769240),
    (0.00000015105, 1.86350524526, 7.70424783180),
    (0.00000015832, 3.42498484109, 79.51690098250),
    (0.00000011492, 4.65187455620, 149.61138124440),
    (0.00000011406, 1.31085455047, 63.62402371880),
    (0.00000014469, 3.35284802718, 19.64371997300),
    (0.00000011953, 0.20979051344, 65.87476231750),
    (0.00000012039, 0.01423238410, 397.39324334740),
    (0.00000014157, 1.87440535404, 6283.07584999140),
    (0.00000011357, 0.19079103112, 5.62907429250),
    (0.00000014109, 0.09348109701, 6133.51265285680),
    (0.00000015322, 3.54468546172, 252.65597135320),
    (0.00000011681, 0.85100356112, 5.10780943070),
    (0.00000014134, 5.66340426198, 639.89728631400),
    (0.00000011052, 0.47607339302, 150.08446199640),
    (0.00000011507, 5.19480309409, 1182.92157353290),
    (0.00000011492, 2.05801478181, 149.51501302480),
    (0.00000011571, 4.78210724970, 334.29048449040),
    (0.00000010671, 4.67373109923, 149.72325582900),
    (0.00000011651, 3.13272450186, 93.90405367850),
    (0.00000014316, 0.08421279341, 240.38643081190),
    (0.00000010855, 4.52379396618, 453.94615868080),
    (0.00000011900, 1.41784572428, 26.02355379090),
    (0.00000010851, 4.40625021974, 57.14361616440),
    (0.00000013385, 0.76174742916, 37.87240320690),
    (0.00000010664, 5.81644528276, 193.65537546500),
    (0.00000010700, 5.34595506070, 331.20966448920),
    (0.00000010465, 3.82648204886, 180.16199464630),
    (0.00000013350, 0.86920479636, 22.89454967990),
    (0.00000010324, 2.99969783109, 525.75881183150),
    (0.00000014293, 1.06904465002, 477.91579079180),
    (0.00000012341, 4.62813430535, 1894.41906467650),
    (0.00000012539, 3.70404881494, 67.07735073550),
    (0.00000011771, 1.07971321862, 363.51668387840),
    (0.00000011466, 0.93528386040, 121.84272231430),
    (0.00000012839, 0.31988787839, 474.94684537520),
    (0.00000010194, 6.23976471898, 84.18276742850),
    (0.00000012300, 2.85238700423, 184.09414790940),
    (0.00000013861, 3.48367688770, 157.26744496640),
    (0.00000011395, 4.25533440680, 181.05576652360),
    (0.00000010146, 6.01371693363, 43.24084506850),
    (0.00000009889, 0.01753733887, 40.16002506730),
    (0.00000010798, 2.46364243940, 140.65636088480),
    (0.00000009893, 2.72219544398, 384.05992122310),
    (0.00000011012, 3.77284307154, 494.26624244250),
    (0.00000010226, 1.49169427598, 80.41067285980),
    (0.00000011981, 2.69741212203, 369.45457471160),
    (0.00000010658, 1.78702880970, 252.08652238160),
    (0.00000012506, 4.66852994807, 64.69910614990),
    (0.00000011640, 5.70405852396, 39.09624348430),
    (0.00000012305, 1.73322306013, 229.08009811710),
    (0.00000009954, 3.72074935511, 233.90602325750),
    (0.00000011004, 3.58723041577, 449.28029223480),
    (0.00000010581, 2.79550711884, 1246.65747183630),
    (0.00000010411, 2.86727145530, 189.18070548070),
    (0.00000009259, 5.19834823120, 749.20983565610),
    (0.00000012468, 0.76477162698, 122.47586176070),
    (0.00000010099, 6.06894682979, 156.15547927360),
    (0.00000012671, 6.19797171716, 149.82382956550),
    (0.00000009053, 0.99447742265, 109.31254934210),
    (0.00000009595, 1.00827882958, 393.46109008430),
    (0.00000010455, 1.23531019351, 148.59998928810),
    (0.00000010645, 5.50399216121, 460.53844081980),
    (0.00000012433, 5.29843661600, 20.49505323490),
    (0.00000009002, 5.51216892840, 133.10087089930),
    (0.00000009882, 5.68987366321, 42.53826965290),
    (0.00000012110, 3.14577799081, 30.05628079050),
    (0.00000010380, 3.54528360301, 619.29035849450),
    (0.00000010139, 1.90528799801, 25.06034594440),
    (0.00000011206, 5.87823238990, 832.58945393250),
    (0.00000009283, 3.00514787072, 754.83890994860),
    (0.00000010994, 0.05721003392, 54.28654533240),
    (0.00000008981, 5.82462023723, 248.46318565920),
    (0.00000008634, 5.49123270314, 448.68959140380),
    (0.00000009390, 1.32674472283, 9.40116886120),
    (0.00000009621, 5.69090299390, 73.88782669000),
    (0.00000010843, 1.42812648220, 268.43697403230),
    (0.00000010874, 2.61361741990, 446.31134681820),
    (0.00000009681, 4.27051176079, 282.66406803390),
    (0.00000010770, 0.19304986906, 463.50738623640),
    (0.00000008223, 3.30114329151, 172.19711438360),
    (0.00000010216, 5.04428111805, 241.87090352020),
    (0.00000008890, 2.53320903906, 271.40591944890),
    (0.00000010621, 4.39013117792, 63.84777288800),
    (0.00000009085, 0.99085954236, 6.90109867970),
    (0.00000010414, 4.96367476854, 97.67614824720),
    (0.00000008382, 5.03764591595, 370.93904741990),
    (0.00000008791, 3.05426995163, 291.26208774300),
    (0.00000008629, 0.14674938050, 262.47783133970),
    (0.00000009673, 4.25597330570, 602.98809095360),
    (0.00000007939, 5.71230451368, 541.53981451060),
    (0.00000007981, 2.35900017752, 196.62432088160),
    (0.00000007941, 0.88239951788, 154.97982310600),
    (0.00000008212, 0.00845991197, 76.42612997000),
    (0.00000010135, 1.90258069764, 91.45637312370),
    (0.00000008948, 4.31891786278, 469.13646052890),
    (0.00000009906, 0.61122653279, 308.31511480930),
    (0.00000008257, 4.61012292958, 69.67378913660),
    (0.00000010291, 3.58217488981, 842.15068148810),
    (0.00000010672, 2.28920805112, 194.28851491140),
    (0.00000009024, 0.70282370018, 685.47393735270),
    (0.00000007552, 4.86800510978, 1097.09427470170),
    (0.00000009496, 1.06662350720, 93.79217909390),
    (0.00000008413, 3.15290837718, 32.71640966640),
    (0.00000008914, 5.03579282562, 450.45594840240),
    (0.00000008008, 4.33420849497, 302.09533968580),
    (0.00000010397, 4.90564475822, 829.62050851590),
    (0.00000007401, 5.67595616187, 337.80194662820),
    (0.00000007419, 3.04672439120, 7.42236354150),
    (0.00000007936, 4.37116642726, 464.47059408290),
    (0.00000009731, 5.70393303400, 98.35747180340),
    (0.00000009287, 4.16913084905, 15.49911838880),
    (0.00000010072, 1.18963356664, 621.73803904930),
    (0.00000009867, 1.34469368253, 142.97091499560),
    (0.00000008913, 1.33679256423, 0.26063243090),
    (0.00000008734, 2.03651443558, 149.40313844020),
    (0.00000007745, 0.14834225031, 1404.08497549710),
    (0.00000009037, 3.53203542312, 636.66770846650),
    (0.00000007707, 1.87083579542, 31.65262808340),
    (0.00000008566, 2.48280357910, 497.44763618020),
    (0.00000010074, 2.59066128203, 711.44930703380),
    (0.00000008726, 5.88905195509, 82.20396210880),
    (0.00000009218, 1.10861658464, 412.58354519550),
    (0.00000009483, 6.02304095716, 916.93228005540),
    (0.00000007012, 6.27635752748, 376.19561469690),
    (0.00000009867, 1.93140204720, 62.77269045690),
    (0.00000007121, 1.54192963162, 679.25416222920),
    (0.00000008440, 5.06400284478, 1.37259812370),
    (0.00000008915, 2.39052372377, 76.15419669100),
    (0.00000009637, 3.78128664809, 838.21852822500),
    (0.00000007059, 5.91499106809, 74.14845912090),
    (0.00000009570, 1.97721363991, 703.63318461740),
    (0.00000007516, 4.87738017916, 310.17209453310),
    (0.00000007059, 1.94098053303, 75.41473801370),
    (0.00000008552, 6.14581140636, 17.63798240290),
    (0.00000006859, 5.11679089849, 107.49800823370),
    (0.00000007148, 1.73466140387, 1190.78588005910),
    (0.00000009112, 0.88368663290, 362.86229257260),
    (0.00000009300, 1.44257902224, 763.43692965770),
    (0.00000009073, 4.31998777457, 16.15350969460),
    (0.00000009126, 3.74417347717, 4.66586644600),
    (0.00000007869, 4.65596954763, 232.42155054920),
    (0.00000009168, 3.25096522859, 155.50108796780),
    (0.00000007624, 0.88232424215, 459.36278465220),
    (0.00000008200, 1.51866334747, 10063.72234907640),
    (0.00000008579, 2.37726234500, 75.67537044460),
    (0.00000007595, 2.63499505823, 657.16276170140),
    (0.00000008131, 6.15861249482, 745.27768239300),
    (0.00000006398, 0.61376490225, 73.24894174920),
    (0.00000007710, 4.02552779925, 4.73530241520),
    (0.00000006380, 3.20688120531, 73.34530996880),
    (0.00000007505, 0.67397826037, 228.79821382680),
    (0.00000007129, 1.33525552417, 236.87496867410),
    (0.00000007444, 3.05581518163, 171.65459766240),
    (0.00000006361, 6.05108999867, 95.97922721780),
    (0.00000007086, 4.88497877319, 6531.66165626500),
    (0.00000006527, 4.01380149030, 118.87377689770),
    (0.00000007984, 1.70695215254, 104.52906281710),
    (0.00000006239, 1.08160874504, 143.93412284210),
    (0.00000007200, 1.19830150903, 1617.38407093510),
    (0.00000006390, 4.83649966441, 1072.71525231350),
    (0.00000007857, 3.06062400692, 341.99473232220),
    (0.00000006158, 0.04340975323, 627.36711334180),
    (0.00000008664, 5.60425824325, 2810.92146160520),
    (0.00000006147, 4.16482048084, 1300.99220127850),
    (0.00000008148, 3.11700641910, 10213.28554621100),
    (0.00000008603, 3.80404544682, 25558.21217647960),
    (0.00000007586, 2.86885781812, 406.10313764110),
    (0.00000007925, 3.11650504000, 81.68269724700),
    (0.00000007063, 5.35078594952, 73.03649342810),
    (0.00000006265, 3.27996815317, 116.53797092750),
    (0.00000007345, 0.45699353973, 192.80404220310),
    (0.00000006878, 1.29690429239, 22.63391724900),
    (0.00000006102, 2.06174377751, 73.97844941520),
    (0.00000007867, 1.45455437627, 131.92521473170),
    (0.00000006837, 0.07237438837, 90.28071695610),
    (0.00000007740, 2.87078307084, 79.44746501330),
    (0.00000006744, 0.01897075429, 572.22923474750),
    (0.00000006034, 0.96635268225, 476.31944349890),
    (0.00000008276, 2.40596529645, 674.80074410430),
    (0.00000006002, 3.24986200464, 76.78733613740),
    (0.00000006863, 1.24850658686, 400.16524680790),
    (0.00000006375, 1.37050567525, 75.15410558280),
    (0.00000007445, 5.47946546419, 50.66320861000),
    (0.00000005889, 5.83364715391, 164.12035953630),
    (0.00000007190, 3.21396813566, 71.15826184490),
    (0.00000006305, 1.65443603478, 70.04629615210),
    (0.00000006628, 1.99043744200, 1.59634729290),
    (0.00000006081, 1.26599890530, 61.44827644300),
    (0.00000007795, 0.70956881527, 44.07092647100),
    (0.00000007784, 5.47416712189, 416.77633088950),
    (0.00000005727, 2.39389303582, 20277.00789528740),
    (0.00000006363, 1.96472326808, 288.73508531110),
    (0.00000005724, 4.30532783970, 86.63044798330),
    (0.00000007348, 5.28008775997, 285.63301345050),
    (0.00000005693, 1.13590287643, 445.34813897170),
    (0.00000005799, 2.43420435064, 180.79513409270),
    (0.00000006927, 4.19297070447, 525.23754696970),
    (0.00000006143, 2.23902465258, 1310.39337013970),
    (0.00000006680, 5.36285833774, 452.46168597250),
    (0.00000005709, 3.65303501856, 442.37919355510),
    (0.00000006238, 4.60538870228, 137.55428902420),
    (0.00000005932, 3.22993254909, 73.45718455340),
    (0.00000007734, 5.72805659987, 154.29849954980),
    (0.00000005782, 2.17577477697, 2.28762186040),
    (0.00000006016, 3.46585546590, 346.39996633730),
    (0.00000007517, 5.63641104589, 549.72844394250),
    (0.00000006685, 4.84971092735, 148.81243760920),
    (0.00000005797, 0.51568102762, 149.30256470370),
    (0.00000007739, 3.23104533276, 589.49471013490),
    (0.00000007590, 2.49504939023, 321.76031151820),
    (0.00000006706, 5.23367324742, 769.81676347560),
    (0.00000007210, 2.56243122515, 375.67434983510),
    (0.00000005491, 1.84139760824, 375.39246554480),
    (0.00000006592, 3.39703193659, 389.68899551560),
    (0.00000006414, 3.56513278405, 488.84961647110),
    (0.00000006376, 0.24081237769, 881.50755740330),
    (0.00000005785, 3.49508162978, 102.52332524700),
    (0.00000006079, 0.84517404881, 89.59939339990),
    (0.00000005799, 2.19388408812, 8.90683624980),
    (0.00000005305, 1.97785611200, 150.31395666000),
    (0.00000005422, 1.21990761182, 332.17287233570),
    (0.00000007235, 2.78896876234, 748.09786996330),
    (0.00000006360, 0.36304095923, 74.40909155180),
    (0.00000005285, 4.41108441808, 12.00890811040),
    (0.00000006602, 3.01699401726, 442.75170057060),
    (0.00000006509, 0.49819168917, 1147.49685088080),
    (0.00000005585, 6.04761249158, 172.45774681450),
    (0.00000006673, 0.77536194908, 6069.77675455340),
    (0.00000007125, 0.34356180793, 511.59540830470),
    (0.00000005288, 4.27462942653, 11.15757484850),
    (0.00000006767, 2.00969662613, 105.38039607900),
    (0.00000005611, 2.40776057824, 1286.01434775150),
    (0.00000006456, 4.48699081452, 31.23193695810),
    (0.00000005898, 5.26174074234, 757.80785536520),
    (0.00000005153, 2.41386832919, 742.99006053260),
    (0.00000005087, 6.03592089039, 980.66817835880),
    (0.00000006198, 0.83056505252, 1507.17774971570),
    (0.00000005425, 1.93107713343, 40.84134862350),
    (0.00000006091, 5.18564204379, 487.10451133190),
    (0.00000005715, 1.96802719384, 394.35486196160),
    (0.00000005509, 1.31275092080, 883.79517926370),
    (0.00000005320, 4.22718652038, 65.38042970610),
    (0.00000005357, 1.80483136985, 139.48070471720),
    (0.00000005204, 3.39869589191, 1400.15282223400),
    (0.00000006537, 2.31923989568, 328.24071907260),
    (0.00000005041, 2.94673346440, 361.37781986430),
    (0.00000004969, 6.27367198215, 0.16005869440),
    (0.00000005334, 2.78985718428, 217.44369702220),
    (0.00000005654, 0.51056760715, 285.11174858870),
    (0.00000006432, 2.21948959433, 9999.98645077300),
    (0.00000005768, 5.10735836078, 216.26804085460),
    (0.00000004977, 2.62435916254, 194.17664032680),
    (0.00000006932, 1.71722863424, 378.90392768260),
    (0.00000005187, 3.04429850681, 1083.76095257740),
    (0.00000005791, 3.94061476250, 550.13783421970),
    (0.00000005816, 2.24843661305, 230.93707784090),
    (0.00000005319, 0.06998825350, 336.83873878170),
    (0.00000005427, 0.30577275388, 40.58071619260),
    (0.00000006469, 3.02579309025, 298.23262239190),
    (0.00000004974, 1.21594265105, 455.06942522170),
    (0.00000004960, 4.72806210230, 454.74930783290),
    (0.00000005619, 2.27500303004, 227.52618943960),
    (0.00000006328, 0.97544932086, 249.94765836750),
    (0.00000005319, 4.59867974067, 454.79749194270),
    (0.00000004791, 4.40360629153, 853.19638175200),
    (0.00000006519, 3.03043401282, 167.72244439930),
    (0.00000005450, 6.00971547441, 25.12978191360),
    (0.00000005094, 3.96693309189, 1066.49547719000),
    (0.00000005779, 0.65954416303, 272.58157561650),
    (0.00000006491, 4.68529651540, 312.19908396260),
    (0.00000005234, 4.34712255335, 233.53351624200),
    (0.00000005396, 5.62885554221, 418.52143602870),
    (0.00000005048, 2.46802064424, 987.56927703850),
    (0.00000006152, 0.79853332272, 2274.54683263650),
    (0.00000006506, 1.72915575120, 125.18417474640),
    (0.00000004993, 3.75975860404, 57.25549074900),
    (0.00000006295, 0.84778953014, 10.08249241740),
    (0.00000006251, 4.78782138567, 270.18207917150),
    (0.00000005785, 4.31237764709, 374.49869366750),
    (0.00000005406, 5.49902863401, 632.78373931320),
    (0.00000006224, 0.12733845417, 149.04193227280),
    (0.00000004921, 1.43037646364, 73.13706716460),
    (0.00000005076, 1.34845106372, 455.02124111190),
    (0.00000005730, 3.30386575867, 88.27497938600),
    (0.00000004618, 0.64720625124, 119.39504175950),
    (0.00000006213, 2.58827934841, 544.50875992720),
    (0.00000004825, 6.08615765986, 304.12232911530),
    (0.00000004825, 6.00483903794, 226.79247625670),
    (0.00000005528, 5.69752791882, 548.44091319030),
    (0.00000005108, 2.74489127167, 423.62924545940),
    (0.00000005426, 2.44835106987, 531.97858695500),
    (0.00000004573, 1.61098293427, 357.44566660120),
    (0.00000004487, 6.09067660554, 204.70107572890),
    (0.00000005866, 6.20513223441, 772.78570889220),
    (0.00000005334, 2.49860553733, 1131.19458333990),
    (0.00000005656, 4.75744184558, 491.81856188770),
    (0.00000004441, 0.23590452375, 35.68535508300),
    (0.00000004370, 3.81136490830, 1329.30337692980),
    (0.00000004406, 3.42865095493, 144.89733068860),
    (0.00000005251, 4.72114047741, 535.32003938710),
    (0.00000005174, 1.37807596858, 520.12973753900),
    (0.00000004331, 2.64717426456, 1517.26024213310),
    (0.00000004802, 2.60569463520, 177.30492381430),
    (0.00000004368, 3.36272561974, 1503.24559645260),
    (0.00000004335, 2.73379207096, 289.56516671360),
    (0.00000005198, 0.97116582962, 128.43500445330),
    (0.00000004437, 0.56678131875, 253.45912050530),
    (0.00000005386, 5.84886051674, 268.69760646320),
    (0.00000005376, 1.30096148962, 436.81380973740),
    (0.00000005797, 4.33049740199, 208.84567731310),
    (0.00000004353, 1.66111524192, 1261.63532536330),
    (0.00000004812, 4.95769337401, 545.47196777370),
    (0.00000005897, 2.04201205180, 8.59801970910),
    (0.00000005032, 2.80550759770, 360.41461201780),
    (0.00000004921, 2.55658380096, 260.36021918500),
    (0.00000004413, 3.23825819993, 973.55463135800),
    (0.00000004506, 0.17509624151, 380.38840039090),
    (0.00000004947, 5.50324549675, 365.90067395840),
    (0.00000004174, 2.99974290843, 136.06981631590),
    (0.00000004553, 2.77416673233, 147.96684984170),
    (0.00000005344, 1.81213470593, 521.09294538550),
    (0.00000005155, 0.78324341489, 1670.07426897460),
    (0.00000005133, 1.37435234967, 271.61836777000),
    (0.00000005708, 2.52872222038, 501.37978944330),
    (0.00000004933, 1.36454104948, 238.90195810360),
    (0.00000004973, 1.92960964594, 535.91074021810),
    (0.00000004935, 5.04375067678, 697.80716836880),
    (0.00000004129, 1.50064332826, 71.86083726050),
    (0.00000005207, 4.01877367340, 92.41958097020),
    (0.00000004587, 4.78553156868, 95.93104310800),
    (0.00000005050, 5.41251268131, 758.77106321170),
    (0.00000005012, 4.50266403888, 635.96513305090),
    (0.00000004248, 0.65406962267, 920.86443331850),
    (0.00000005150, 1.13490701556, 310.97524368520),
    (0.00000004146, 5.54040372231, 1048.33622992530),
    (0.00000004256, 4.20942901957, 25.27279426550),
    (0.00000004569, 5.19758291396, 10.29494073850),
    (0.00000004259, 5.53202386861, 184.98791978670),
    (0.00000004315, 2.80569687202, 213.95348674380),
    (0.00000004604, 2.51643176466, 962.50893109410),
    (0.00000005105, 1.26007002216, 971.10695080320),
    (0.00000004500, 6.15796742231, 1052.26838318840),
    (0.00000004095, 0.63467124507, 1321.43907040360),
    (0.00000003968, 0.07377679014, 77.70235987410),
    (0.00000004617, 2.77367751889, 406.95447090300),
    (0.00000004899, 4.65767840428, 305.60680182360),
    (0.00000003900, 1.66467970991, 945.24345570670),
    (0.00000004133, 3.76396043787, 263.02034806090),
    (0.00000003899, 4.28677450975, 224.23292111730),
    (0.00000005030, 6.24112139981, 1162.47470440780),
    (0.00000005024, 0.39738855487, 968.13800538660),
    (0.00000004894, 2.50422546622, 355.74874557180),
    (0.00000004283, 3.15267059582, 846.08283475120),
    (0.00000003941, 0.04342429962, 1235.61177157240),
    (0.00000004077, 5.68854469970, 695.55642977010),
    (0.00000003842, 0.37429373422, 774.48262992160),
    (0.00000004674, 0.08112657673, 1366.21257229020),
    (0.00000004671, 4.38923533828, 117.36805233000),
    (0.00000005313, 4.38472090135, 689.61853893690),
    (0.00000003787, 1.41443617212, 48.91810347080),
    (0.00000004236, 1.60316940746, 367.59759498780),
    (0.00000004569, 2.88138923862, 551.10104206620),
    (0.00000004636, 5.93442268083, 148.19059901090),
    (0.00000005128, 0.17600225009, 433.71173787680),
    (0.00000004264, 2.08657038625, 325.38364824060),
    (0.00000003885, 5.85359840623, 450.71658083330),
    (0.00000004753, 2.58442943928, 358.40887444770),
    (0.00000004226, 6.24596640453, 448.97147569410),
    (0.00000003776, 1.78756451192, 71.70077856610),
    (0.00000004912, 4.45665056284, 51.88704888740),
    (0.00000003854, 2.72138633161, 151.85081899500),
    (0.00000004561, 0.07201979569, 2349.32843120380),
    (0.00000004291, 5.39929339966, 523.75307426140),
    (0.00000004143, 0.17158866270, 735.87651353180),
    (0.00000003806, 1.44358694049, 138.62937145530),
    (0.00000003654, 2.41520715554, 348.84764689210),
    (0.00000003728, 1.69745141654, 984.71220620650),
    (0.00000004176, 4.01139155515, 195.77298761970),
    (0.00000004986, 1.03562905920, 224.45667028650),
    (0.00000004031, 0.92145122185, 76.00543884470),
    (0.00000004098, 3.51214223942, 72.49397670690),
    (0.00000003812, 4.41246815759, 1511.32235129990),
    (0.00000004098, 2.39702785276, 239.16259053450),
    (0.00000004894, 5.26621064696, 601.50361824530),
    (0.00000004459, 5.76440378473, 836.52160719560),
    (0.00000004373, 4.08948598951, 75.43598987310),
    (0.00000004363, 6.01127167247, 421.18156490460),
    (0.00000004414, 0.35830661600, 168.31314523030),
    (0.00000003700, 2.04103813925, 63.21463344160),
    (0.00000004648, 2.07482117651, 1106.65550225730),
    (0.00000004304, 3.03122452327, 1109.62444767390),
    (0.00000003618, 4.84400847177, 893.35640681930),
    (0.00000004023, 0.59685650686, 91.24392480260),
    (0.00000004937, 5.49417275871, 976.73602509570),
    (0.00000004373, 3.76648561161, 74.12720726150),
    (0.00000004310, 3.72983787822, 673.31627139600),
    (0.00000004680, 3.89631254150, 163.57784281510),
    (0.00000004172, 0.75349427039, 1500.06420271490),
    (0.00000004492, 1.87283145714, 141.17762574660),
    (0.00000004174, 5.82910805335, 346.44815044710),
    (0.00000003775, 0.83052387256, 827.92358748650),
    (0.00000003481, 2.70828672792, 818.57480825200),
    (0.00000004853, 0.95917381603, 58.17051448570),
    (0.00000004021, 3.11274455034, 377.41945497430),
    (0.00000004409, 0.16607520728, 630.33605875840),
    (0.00000003597, 1.02560564654, 515.46387109300),
    (0.00000003444, 1.38488805947, 117.31986822020),
    (0.00000004021, 5.68447974866, 3.49021027840),
    (0.00000004244, 3.75845344717, 733.42883297700),
    (0.00000003933, 4.55157642432, 240.12579838100),
    (0.00000004421, 1.51263319894, 1610.27052393430),
    (0.00000003390, 4.00215380112, 74.99404688840),
    (0.00000004556, 3.41531360529, 1140.38330388000),
    (0.00000004171, 0.76417016678, 623.43496007870),
    (0.00000003441, 2.56450835637, 14.81779483260),
    (0.00000003587, 4.10186965494, 343.21857259960),
    (0.00000003997, 5.74857613262, 6212.22640468720),
    (0.00000004215, 0.84469743228, 176.65053250850),
    (0.00000004098, 1.41920746453, 559.69906177530),
    (0.00000004553, 1.09016692751, 561.88610989920),
    (0.00000003493, 0.11837510368, 1031.87390369000),
    (0.00000003596, 5.33968666729, 394.94556279260),
    (0.00000003501, 5.53309359866, 594.91133610630),
    (0.00000003564, 1.57868308864, 354.99798604640),
    (0.00000004279, 2.35436288262, 562.66800719190),
    (0.00000003398, 1.62086348540, 941.31130244360),
    (0.00000003803, 1.78948693511, 251.17149864490),
    (0.00000003299, 5.13631478768, 477.00076705510),
    (0.00000003422, 3.55674695079, 256.42806592190),
    (0.00000003802, 4.09287840097, 268.95823889410),
    (0.00000003818, 4.64162443046, 71.92452773530),
    (0.00000004623, 2.72836206211, 6244.94281435360),
    (0.00000003466, 1.91387688001, 58.73996345730),
    (0.00000003435, 2.96178782926, 995.64603188580),
    (0.00000003626, 5.35614681493, 57.51612317990),
    (0.00000004512, 1.18350543284, 170.76082578510),
    (0.00000004378, 0.27346037700, 469.72716135990),
    (0.00000003323, 4.51516827363, 454.86118241750),
    (0.00000003320, 1.42938752044, 454.95755063710),
    (0.00000004578, 4.74980514730, 731.94436026870),
    (0.00000003249, 0.67719975914, 74.04788538440),
    (0.00000004145, 5.58064267022, 57.79800747020),
    (0.00000003512, 6.09122971288, 70.58881287330),
    (0.00000003814, 2.49565462974, 6204.36209816100),
    (0.00000003828, 4.39751907192, 586.31331639720),
    (0.00000003639, 4.85097208169, 138.40562228610),
    (0.00000003518, 0.52105043625, 262.80789973980),
    (0.00000003671, 1.99667387765, 511.53171782990),
    (0.00000003215, 0.64628330219, 887.72733252680),
    (0.00000003718, 3.27473813045, 454.64873409640),
    (0.00000003638, 2.63250736806, 455.16999895820),
    (0.00000003772, 0.88810300052, 10142.43610090680),
    (0.00000003190, 4.87960158471, 455.66012605270),
    (0.00000003669, 4.11456655271, 409.92341631960),
    (0.00000003166, 1.24948126394, 82.64590509350),
    (0.00000003530, 4.02075420346, 388.20452280730),
    (0.00000003163, 1.65294183878, 765.88461021250),
    (0.00000003568, 5.95965909592, 460.84725736050),
    (0.00000003450, 0.08821515281, 49.17873590170),
    (0.00000003270, 1.81146731641, 34.20088237470),
    (0.00000003188, 1.74587038709, 18.91000679010),
    (0.00000003305, 5.77382040863, 10.52443540210),
    (0.00000003345, 4.15802505352, 1515.77576942480),
    (0.00000003160, 1.06549289762, 454.15860700190),
    (0.00000003525, 2.56091667232, 78114.14622758799),
    (0.00000004124, 1.06751791085, 388.46515523820),
    (0.00000004016, 2.48751669586, 531.17543780290),
    (0.00000003147, 5.05814757549, 1521.40484371730),
    (0.00000004180, 1.16833674781, 514.56435372130),
    (0.00000003212, 3.18682610058, 1512.80682400820),
    (0.00000003486, 0.22630227172, 36.53668834490),
    (0.00000004211, 3.21876950029, 761.74000862830),
    (0.00000003485, 3.26177495276, 36.76043751410),
    (0.00000003506, 6.26633354904, 545.27502581760),
    (0.00000003733, 2.55776517455, 279.48267429620),
    (0.00000004227, 1.41381723926, 41.75637236020),
    (0.00000003187, 1.62296832026, 138.46931276090),
    (0.00000003934, 2.86731965547, 832.06818907070),
    (0.00000003684, 3.94174060300, 179.31066138440),
    (0.00000003115, 5.67364420834, 73.55775828990),
    (0.00000003663, 1.80556740809, 31.54075349880),
    (0.00000003171, 4.85529878165, 138.56568098050),
    (0.00000003777, 5.94890597104, 873.17017012510),
    (0.00000004357, 4.15105623366, 10175.15251057320),
    (0.00000003951, 1.60185888278, 576.16138801060),
    (0.00000003525, 4.80316435970, 429.77958461370),
    (0.00000003330, 5.62171319933, 1116.00428149180),
    (0.00000003943, 4.62641543020, 898.77303279070),
    (0.00000003382, 1.45717307307, 5983.94945572220),
    (0.00000003215, 3.73878297941, 335.77495719870),
    (0.00000003423, 5.07987216951, 143.34342201110),
    (0.00000004161, 5.39091883238, 1363.24362687360),
    (0.00000003457, 3.94796907904, 444.82687410990),
    (0.00000003593, 3.91831549069, 10134.57179438060),
    (0.00000003666, 4.22620338990, 36.17548217750),
    (0.00000003580, 3.43130119859, 912.78767847120),
    (0.00000003700, 0.67445695843, 73.93026530540),
    (0.00000003679, 1.10949079061, 686.95841006100),
    (0.00000003547, 5.63096398237, 440.89472084680),
    (0.00000003622, 1.10742531477, 2250.16781024830),
    (0.00000003562, 3.80604468765, 1525.33699698040),
    (0.00000003330, 1.76480149289, 78.97438426130),
    (0.00000003738, 1.76754910180, 384.58118608490),
    (0.00000003986, 1.06842874470, 743.79320968470),
    (0.00000003032, 5.77852412826, 612.17681149370),
    (0.00000003008, 0.64086342534, 210.85141488320),
    (0.00000003334, 4.81681647959, 597.35901666110),
    (0.00000003141, 3.11768616608, 6607.92772754060),
    (0.00000003022, 2.08709314702, 34.53095077480),
    (0.00000003226, 3.19780030434, 377.68008740520),
    (0.00000004065, 3.53637930424, 402.21916848780),
    (0.00000004138, 0.28927701421, 517.16079212240),
    (0.00000003697, 0.89932694516, 75.63293182920),
    (0.00000003918, 5.73859894835, 94.42531854030),
    (0.00000003374, 0.40974405580, 677.76968952090),
    (0.00000003194, 4.56998602897, 1385.17496870700),
    (0.00000003180, 1.03370427552, 885.43971066640),
    (0.00000003235, 5.09681747179, 464.99185894470),
    (0.00000003798, 5.76464888795, 586.37700687200),
    (0.00000003173, 5.68964342749, 4.19278569400),
    (0.00000003181, 2.87968862974, 9914.15915194180),
    (0.00000003355, 5.45857968674, 73.08467753790),
    (0.00000002899, 5.12928266291, 448.31708438830),
    (0.00000003706, 2.47342147635, 64.25716316520),
    (0.00000003796, 4.29502458131, 164.54105066160),
    (0.00000003534, 4.42464754991, 46.47042291600),
    (0.00000003488, 5.62713714766, 3189.56475685690),
    (0.00000002940, 4.33606107945, 78263.70942472259),
    (0.00000003309, 3.10770680369, 519.60847267720),
    (0.00000004030, 4.41794838679, 772.58876693610),
    (0.00000002867, 5.17129632099, 346.18751801620),
    (0.00000003842, 1.87994191354, 299.71709510020),
    (0.00000003846, 5.38315286213, 980.14691349700),
    (0.00000003724, 4.94511644698, 984.48845703730),
    (0.00000002814, 2.17260061398, 191.31956949480),
    (0.00000003392, 3.08552116090, 245.49424024260),
    (0.00000002923, 0.37358823115, 6.48040755440),
    (0.00000003025, 1.19297242418, 104.83787935780),
    (0.00000003470, 1.89084704021, 44.61344319220),
    (0.00000002931, 0.78809830626, 540.05534180230),
    (0.00000003707, 4.14868763219, 6136.48159827340),
    (0.00000003931, 5.52289695589, 6171.64568849460),
    (0.00000003056, 2.97000936733, 250.60204967330),
    (0.00000003117, 0.76332399369, 229.45260513260),
    (0.00000003091, 4.91941279780, 221.16340196420),
    (0.00000003378, 3.82658652472, 25936.85547173129),
    (0.00000003041, 2.14503983522, 6604.95878212400),
    (0.00000002865, 0.53734608663, 273.85360000370),
    (0.00000002845, 0.34922064899, 85.93917341580),
    (0.00000003657, 6.02755271763, 340.88276662940),
    (0.00000002818, 4.44508352472, 369.34270012700),
    (0.00000002861, 2.19284349075, 295.19424100610),
    (0.00000002865, 3.21935127992, 3.82027867850),
    (0.00000002797, 5.97725967979, 2014.02655475710),
    (0.00000003280, 0.74832416123, 422.71422172270),
    (0.00000003509, 1.92501559437, 343.47920503050),
    (0.00000002962, 2.29867992492, 661.15860543930),
    (0.00000003485, 4.53205302380, 676.28521681260),
    (0.00000002836, 1.20779683660, 1119.18567522950),
    (0.00000003603, 2.72183511139, 508.62646288810),
    (0.00000003620, 5.57691156197, 10066.69129449300),
    (0.00000002731, 0.96663411770, 582.38116313410),
    (0.00000003306, 6.20620840278, 11.56696512570),
    (0.00000003279, 6.13563821647, 276.07178589490),
    (0.00000002747, 4.57476263020, 226.63241756230),
    (0.00000002825, 1.24120423378, 989.05374974680),
    (0.00000002707, 0.46257342768, 1458.47209456600),
    (0.00000002755, 5.43548338507, 246.97871295090),
    (0.00000003338, 3.98641322371, 488.58898404020),
    (0.00000002960, 5.31788128818, 1467.07011427510),
    (0.00000003062, 1.93542241882, 987.78172535960),
    (0.00000003504, 4.10521239427, 6280.10690457480),
    (0.00000003584, 3.12196206517, 108.72184851110),
    (0.00000002975, 0.13746189123, 9987.45627780080),
    (0.00000002634, 5.61201014857, 412.37109687440),
    (0.00000003702, 0.66231252049, 10101.85538471420),
    (0.00000003261, 4.39228048501, 75.37229939830),
    (0.00000002939, 3.26319979850, 130.55261660800),
    (0.00000002742, 6.24317126103, 447.20511869550),
    (0.00000003008, 4.24451493185, 170.17012495410),
    (0.00000003001, 2.45489658954, 230.82520325630),
    (0.00000002722, 4.98348297926, 754.03576079650),
    (0.00000002928, 5.73784691627, 14.66903698630),
    (0.00000002699, 2.98043546816, 27.72047482030),
    (0.00000003678, 3.46436124301, 26468.03090953420),
    (0.00000003500, 4.41810854452, 322.61164478010),
    (0.00000002943, 3.58544468129, 12489.88562870720),
    (0.00000002894, 2.26999120840, 1615.89959822680),
    (0.00000002679, 1.32002304425, 236.19364511790),
    (0.00000002711, 1.25250599577, 52250.58788171570),
    (0.00000002573, 4.41371056719, 262.05714021440),
    (0.00000003483, 1.97113718781, 655.93892142400),
    (0.00000002600, 3.80107226970, 70.63699698310),
    (0.00000003280, 1.75059058234, 683.98946464440),
    (0.00000003260, 3.46047977615, 74.19089773630),
    (0.00000003097, 5.47452034532, 302.37722397610),
    (0.00000002565, 3.47443238116, 2042.49778910280),
    (0.00000003158, 4.58160924364, 12492.85457412380),
    (0.00000003373, 5.52806001629, 10210.31660079440),
    (0.00000002619, 4.43681016753, 949.17560896980),
    (0.00000003290, 1.35055242247, 515.67631941410),
    (0.00000003180, 4.49938964982, 694.83822295220),
    (0.00000002558, 5.07921716363, 197.79997704920),
    (0.00000002902, 2.61388996483, 115.36231475990),
    (0.00000002586, 4.09771865336, 1448.91086701040),
    (0.00000003160, 4.82168102018, 714.67888488130),
    (0.00000003016, 3.16691101108, 385.75684225250),
    (0.00000003001, 3.24181300229, 1618.86854364340),
    (0.00000003319, 5.98200177347, 533.83556667880),
    (0.00000003307, 3.31452419197, 732.97125859000),
    (0.00000002530, 0.13809025963, 591.94239068970),
    (0.00000002975, 5.72770980032, 1011.42703456490),
    (0.00000002857, 4.11031053901, 2267.43328563570),
    (0.00000003091, 4.87979664891, 582.64179556500),
    (0.00000003422, 6.18592254593, 281.48841186630),
    (0.00000002501, 0.50645055144, 29.22619938800),
    (0.00000003502, 0.17203520151, 371.52974825090),
    (0.00000002607, 3.51828908958, 112.39336934330),
    (0.00000002547, 4.45612695304, 901.22071334550),
    (0.00000002778, 4.97805873371, 132.57960603750),
    (0.00000002476, 1.55163657371, 1234.12729886410),
    (0.00000002929, 2.34725672182, 273.15102458810),
    (0.00000002724, 5.73177362443, 688.65533109040),
    (0.00000002667, 6.13733078138, 161.41204655060),
    (0.00000002877, 5.47506403197, 1436.54075273260),
    (0.00000002779, 1.54196175338, 680.05731138130),
    (0.00000002427, 4.64913431310, 392.65794093220),
    (0.00000003223, 2.57976952494, 267.58564077040),
    (0.00000002750, 1.29662662582, 108.98248094200),
    (0.00000003220, 1.06290187940, 388.72578766910),
    (0.00000003236, 3.47802643973, 283.62727588040),
    (0.00000003027, 5.38233284458, 44.09217833040),
    (0.00000002830, 5.70274947128, 327.43756992050),
    (0.00000002768, 5.42256168790, 482.25733433210),
    (0.00000003230, 5.65661970187, 134.37289528650),
    (0.00000002685, 5.03687735302, 763.22448133660),
    (0.00000002441, 5.19830386978, 380.23964254460),
    (0.00000002608, 3.11386505876, 578.44900987100),
    (0.00000002465, 1.49242672830, 141.69889060840),
    (0.00000002332, 3.19371804203, 683.02625679790),
    (0.00000002307, 4.07685834192, 78.92620015150),
    (0.00000002280, 2.52476606956, 156.67674413540),
    (0.00000002260, 6.23958645351, 400.57463708510),
    (0.00000002301, 2.47762267951, 107.91869935900),
    (0.00000003089, 5.69639540598, 537.39521292640),
    (0.00000003074, 1.16740737548, 58.62808887270),
    (0.00000002846, 0.02430566936, 563.37058260750),
    (0.00000002423, 4.24559706691, 27.74172667970),
    (0.00000002670, 3.48404619442, 123.01837848190),
    (0.00000002228, 3.33159258912, 1257.70317210020),
    (0.00000002445, 2.29979337782, 280.21638747910),
    (0.00000002260, 3.85026258012, 753.14198891920),
    (0.00000002195, 4.94038065567, 1222.27844944810),
    (0.00000002579, 1.76841912074, 710.74673161820),
    (0.00000002402, 4.47942458428, 569.04784100980),
    (0.00000002181, 5.39048760967, 318.67949151700),
    (0.00000002317, 6.27946729049, 493.04240216510),
    (0.00000002420, 3.66436222896, 3.62333672240),
)

R1 = (
    (0.01479896370, 3.67205705317, 74.78159856730),
    (0.00071212085, 6.22601006675, 63.73589830340),
    (0.00068626972, 6.13411265052, 149.56319713460),
    (0.00020857262, 5.24625494219, 11.04570026390),
    (0.00021468152, 2.60176704270, 76.26607127560),
    (0.00024059649, 3.14159265359, 0.00000000000),
    (0.00011405346, 0.01848461561, 70.84944530420),
    (0.00007496775, 0.42360033283, 73.29712585900),
    (0.00004243800, 1.41692350371, 85.82729883120),
    (0.00003505936, 2.58354048851, 138.51749687070),
    (0.00003228835, 5.25499602896, 3.93215326310),
    (0.00003926694, 3.15513991323, 71.81265315070),
    (0.00003060010, 0.15321893225, 1.48447270830),
    (0.00003578446, 2.31160668309, 224.34479570190),
    (0.00002564251, 0.98076846352, 148.07872442630),
    (0.00002429445, 3.99440122468, 52.69019803950),
    (0.00001644719, 2.65349313124, 127.47179660680),
    (0.00001583766, 1.43045619196, 78.71375183040),
    (0.00001413112, 4.57461892062, 202.25339517410),
    (0.00001489525, 2.67559167316, 56.62235130260),
    (0.00001403237, 1.36985349744, 77.75054398390),
    (0.00001228220, 1.04703640149, 62.25142559510),
    (0.00001508028, 5.05996325425, 151.04766984290),
    (0.00000992085, 2.17168865909, 65.22037101170),
    (0.00001032731, 0.26459059027, 131.40394986990),
    (0.00000861867, 5.05530802218, 351.81659230870),
    (0.00000744445, 3.07640148939, 35.16409022120),
    (0.00000604362, 0.90717667985, 984.60033162190),
    (0.00000646851, 4.47290422910, 70.32818044240),
    (0.00000574710, 3.23070708457, 447.79581952650),
    (0.00000687470, 2.49912565674, 77.96299230500),
    (0.00000623602, 0.86253073820, 9.56122755560),
    (0.00000527794, 5.15136007084, 2.96894541660),
    (0.00000561839, 2.71778158980, 462.02291352810),
    (0.00000530364, 5.91655309045, 213.29909543800),
    (0.00000460080, 4.22302465979, 12.53017297220),
    (0.00000494280, 0.46291078127, 145.63104387150),
    (0.00000487336, 0.70614146398, 380.12776796000),
    (0.00000380908, 3.85089591694, 3.18139373770),
    (0.00000444352, 2.15558291251, 67.66805156650),
    (0.00000338800, 2.53820897704, 18.15924726470),
    (0.00000372947, 5.05141251694, 529.69096509460),
    (0.00000348345, 1.74874852104, 71.60020482960),
    (0.00000405881, 1.22961727600, 22.09140052780),
    (0.00000268913, 6.24069521597, 340.77089204480),
    (0.00000255585, 2.95695013627, 84.34282612290),
    (0.00000259465, 3.92053708924, 59.80374504030),
    (0.00000224731, 3.90961468562, 160.60889739850),
    (0.00000221710, 3.64727173951, 137.03302416240),
    (0.00000254591, 3.50411592815, 38.13303563780),
    (0.00000238290, 2.04879982674, 269.92144674060),
    (0.00000272355, 3.38363105223, 222.86032299360),
    (0.00000200648, 1.24861003313, 69.36497259590),
    (0.00000234153, 0.27825220612, 108.46121608020),
    (0.00000188515, 4.41307507326, 265.98929347750),
    (0.00000211691, 0.68027381802, 111.43016149680),
    (0.00000205946, 1.53379817229, 284.14854074220),
    (0.00000196179, 4.77152996605, 299.12639426920),
    (0.00000153102, 5.21761881347, 209.36694217490),
    (0.00000162563, 4.34054353610, 33.67961751290),
    (0.00000150563, 1.98966326297, 54.17467074780),
    (0.00000137012, 0.40323866041, 195.13984817330),
    (0.00000117171, 0.39649791652, 87.31177153950),
    (0.00000127913, 2.40333045173, 39.61750834610),
    (0.00000104218, 2.92152185788, 134.58534360760),
    (0.00000103862, 1.81622936156, 72.33391801250),
    (0.00000105741, 0.17067407327, 79.23501669220),
    (0.00000106419, 0.69799543514, 2.44768055480),
    (0.00000095326, 4.02880266738, 82.85835341460),
    (0.00000104772, 4.43616414428, 305.34616939270),
    (0.00000093825, 5.01823592717, 51.20572533120),
    (0.00000103739, 2.57553519741, 191.20769491020),
    (0.00000106679, 1.22996874093, 225.82926841020),
    (0.00000093452, 3.09274255916, 77.22927912210),
    (0.00000097398, 3.81380841075, 152.53214255120),
    (0.00000084583, 5.72473747348, 68.84370773410),
    (0.00000077395, 0.08281157747, 45.57665103870),
    (0.00000076207, 4.20384370842, 73.81839072080),
    (0.00000086249, 0.53131085736, 145.10977900970),
    (0.00000075795, 3.78559826812, 75.74480641380),
    (0.00000077592, 1.63628139623, 479.28838891550),
    (0.00000084612, 0.61662456010, 116.42609634290),
    (0.00000100209, 4.94084867643, 120.35824960600),
    (0.00000072142, 4.30505812564, 565.11568774670),
    (0.00000070733, 2.38450718488, 60.76695288680),
    (0.00000071585, 3.93906647867, 153.49535039770),
    (0.00000084566, 5.56037336584, 344.70304530790),
    (0.00000063556, 1.93742986679, 41.64449777560),
    (0.00000071619, 3.71213491656, 408.43894361130),
    (0.00000061594, 3.90006698249, 4.45341812490),
    (0.00000064973, 1.55845503407, 106.97674337190),
    (0.00000059913, 0.60110866128, 74.89347315190),
    (0.00000062000, 4.39369268007, 453.42489381900),
    (0.00000063361, 4.19159979468, 184.72728735580),
    (0.00000062301, 3.23773103318, 422.66603761290),
    (0.00000054427, 3.72545550857, 7.11354700080),
    (0.00000052474, 6.08562717749, 404.50679034820),
    (0.00000059073, 1.55568469603, 456.39383923560),
    (0.00000052597, 3.50492233970, 125.98732389850),
    (0.00000052835, 5.20100035142, 358.93013930950),
    (0.00000058123, 5.33480562448, 220.41264243880),
    (0.00000052909, 4.44819701196, 426.59819087600),
    (0.00000050934, 0.52638534200, 490.33408917940),
    (0.00000054968, 1.60146090981, 14.97785352700),
    (0.00000049491, 4.25534603275, 5.41662597140),
    (0.00000051303, 0.36772379136, 206.18554843720),
    (0.00000051821, 1.75832999538, 8.07675484730),
    (0.00000056964, 0.84114552694, 146.59425171800),
    (0.00000049109, 0.94061875871, 99.16062095550),
    (0.00000046361, 5.35115472594, 152.74459087230),
    (0.00000048023, 1.97249712347, 288.08069400530),
    (0.00000043772, 3.03713403879, 20.60692781950),
    (0.00000049493, 5.84619560979, 112.91463420510),
    (0.00000041987, 0.04620500196, 128.95626931510),
    (0.00000048628, 3.62817742782, 81.00137369080),
    (0.00000041472, 2.33730376429, 277.03499374140),
    (0.00000039983, 5.09525356576, 35.42472265210),
    (0.00000041948, 2.51050760642, 24.37902238820),
    (0.00000038325, 3.61946898382, 173.94221952280),
    (0.00000038385, 2.06003220130, 333.65734504400),
    (0.00000042597, 1.26088737300, 1514.29129671650),
    (0.00000038855, 0.74239364306, 347.88443904560),
    (0.00000038535, 4.95064283065, 92.94084583200),
    (0.00000033234, 1.38358507432, 74.66972398270),
    (0.00000033788, 3.68407945156, 66.91729204110),
    (0.00000038953, 5.49236040328, 200.76892246580),
    (0.00000031850, 0.53990592534, 203.73786788240),
    (0.00000033320, 6.26012644668, 1059.38193018920),
    (0.00000030806, 2.53797566903, 977.48678462110),
    (0.00000029198, 5.43116906000, 58.10682401090),
    (0.00000030059, 0.19481555617, 387.24131496080),
    (0.00000028997, 3.10546504714, 991.71387862270),
    (0.00000035640, 3.72863820177, 96.87299909510),
    (0.00000027607, 0.37142052647, 80.19822453870),
    (0.00000032492, 4.38403518987, 221.37585028530),
    (0.00000027029, 1.35552416596, 0.96320784650),
    (0.00000031276, 0.79566430555, 373.01422095920),
    (0.00000031122, 2.05381353845, 230.56457082540),
    (0.00000025883, 3.46808071409, 144.14657116320),
    (0.00000030201, 0.71392007232, 109.94568878850),
    (0.00000024688, 3.04162764358, 14.01464568050),
    (0.00000027882, 4.76559523368, 415.55249061210),
    (0.00000025110, 5.12405829717, 81.37388070630),
    (0.00000025582, 2.56904073164, 522.57741809380),
    (0.00000024351, 2.20289059750, 628.85158605010),
    (0.00000025479, 1.79521877300, 143.62530630140),
    (0.00000024182, 5.67160913092, 443.86366626340),
    (0.00000025679, 5.43185950751, 546.95644048200),
    (0.00000024177, 5.59982039849, 32.19514480460),
    (0.00000024428, 3.30271734903, 617.80588578620),
    (0.00000023535, 0.65842590604, 46.20979048510),
    (0.00000022371, 4.82094751058, 135.54855145410),
    (0.00000027179, 2.02720001624, 536.80451209540),
    (0.00000022213, 4.61664624220, 391.17346822390),
    (0.00000021973, 4.59216260632, 241.61027108930),
    (0.00000020813, 0.24392941148, 465.95506679120),
    (0.00000027264, 2.15210992383, 140.00196957900),
    (0.00000021356, 5.27168432406, 159.12442469020),
    (0.00000023632, 4.94972840898, 561.18353448360),
    (0.00000024921, 0.54550733267, 181.75834193920),
    (0.00000023027, 3.80632203913, 55.13787859430),
    (0.00000019799, 1.30259938601, 518.64526483070),
    (0.00000019252, 1.31448491434, 543.02428721890),
    (0.00000019704, 4.90869636976, 909.81873305460),
    (0.00000020801, 0.91178207093, 76.47851959670),
    (0.00000019876, 0.66494008343, 66.70484372000),
    (0.00000018957, 4.67998817036, 98.89998852460),
    (0.00000025913, 4.52903186569, 454.90936652730),
    (0.00000021888, 1.23372931740, 41.10198105440),
    (0.00000018703, 6.09640927844, 103.09277421860),
    (0.00000018207, 0.97283864525, 55.65914345610),
    (0.00000021247, 4.19373732137, 329.72519178090),
    (0.00000019408, 4.31468230800, 6.21977512350),
    (0.00000018497, 5.78624335074, 142.44965013380),
    (0.00000022588, 5.84591645052, 297.64192156090),
    (0.00000016770, 6.09084656811, 211.81462272970),
    (0.00000016432, 2.50008469020, 61.28821774860),
    (0.00000020361, 3.16137245375, 186.21176006410),
    (0.00000015955, 2.98317221345, 81.89514556810),
    (0.00000018953, 6.01226591746, 155.78297225810),
    (0.00000017686, 4.82613965176, 273.10284047830),
    (0.00000015141, 3.65588411561, 472.17484191470),
    (0.00000018440, 3.47582817224, 36.64856292950),
    (0.00000016303, 0.13086415177, 554.06998748280),
    (0.00000018633, 0.23932740251, 23.57587323610),
    (0.00000014352, 2.69389896537, 70.11573212130),
    (0.00000015190, 2.43789398875, 486.40193591630),
    (0.00000014002, 5.12389205028, 29.20494752860),
    (0.00000015758, 4.24947053051, 146.38180339690),
    (0.00000014125, 1.55719788547, 110.20632121940),
    (0.00000017477, 1.94549668506, 835.03713448730),
    (0.00000013691, 1.63831110442, 92.04707395470),
    (0.00000013801, 0.13721153975, 235.39049596580),
    (0.00000013573, 2.85427895075, 49.50880430180),
    (0.00000012563, 3.20921738646, 100.38446123290),
    (0.00000012390, 2.88595800082, 60.55450456570),
    (0.00000014986, 0.32593957273, 259.50888592310),
    (0.00000012922, 2.77565630582, 105.49227066360),
    (0.00000012323, 3.36427641421, 440.68227252570),
    (0.00000015233, 0.25589845180, 258.87574647670),
    (0.00000012106, 0.10857558014, 157.63995198190),
    (0.00000012883, 0.30655541587, 124.29040286910),
    (0.00000010900, 3.42905554547, 33.13710079170),
    (0.00000011206, 4.98840478043, 604.47256366190),
    (0.00000010812, 3.86253020441, 767.36908292080),
    (0.00000011561, 2.60450144944, 166.82867252200),
    (0.00000010200, 5.27810824796, 264.50482076920),
    (0.00000010926, 0.64149188846, 558.00214074590),
    (0.00000012315, 4.33998516461, 16.67477455640),
    (0.00000009946, 0.67298666287, 31.49256938900),
    (0.00000012641, 4.83194943583, 114.39910691340),
    (0.00000010479, 0.20404797652, 275.55052103310),
    (0.00000011291, 0.96120625051, 373.90799283650),
    (0.00000012144, 1.91712815063, 378.64329525170),
    (0.00000012229, 0.70465454670, 218.40690486870),
    (0.00000010753, 5.74480767273, 88.11492069160),
    (0.00000009481, 0.65566927406, 353.30106501700),
    (0.00000011006, 2.62953946665, 154.01661525950),
    (0.00000009113, 2.99457723478, 681.54178408960),
    (0.00000010429, 2.33056994007, 132.88842257820),
    (0.00000009169, 4.79284571455, 216.48048917570),
    (0.00000009341, 0.75923548315, 129.91947716160),
    (0.00000008917, 0.78008399009, 67.35923502580),
    (0.00000008757, 6.12717748848, 150.52640498110),
    (0.00000009637, 2.88664912193, 67.88049988760),
    (0.00000010465, 0.36943456465, 699.70103135430),
    (0.00000009301, 1.49620591593, 19.64371997300),
    (0.00000009367, 5.26481516822, 80.71948940050),
    (0.00000010076, 3.56540311122, 278.51946644970),
    (0.00000009455, 3.06088968751, 149.67507171920),
    (0.00000009168, 3.02528121597, 162.09337010680),
    (0.00000008395, 2.18455001650, 342.25536475310),
    (0.00000009233, 5.32613442062, 152.01087768940),
    (0.00000009786, 2.43713607191, 75.30286342910),
    (0.00000010029, 0.81917102953, 339.28641933650),
    (0.00000009429, 1.93671715384, 147.11551657980),
    (0.00000007861, 4.71717822837, 106.01353552540),
    (0.00000008813, 0.01616162513, 42.58645376270),
    (0.00000007808, 0.61104170424, 135.33610313300),
    (0.00000008193, 2.59644466423, 469.13646052890),
    (0.00000010084, 2.58619215129, 50.40257617910),
    (0.00000008574, 5.69115937472, 760.25553592000),
    (0.00000007525, 2.64764195045, 5.93789083320),
    (0.00000008699, 0.54050826161, 66.18357885820),
    (0.00000008027, 1.94079002321, 180.27386923090),
    (0.00000007547, 5.94593031762, 97.41551581630),
    (0.00000007597, 5.80197738402, 450.97721326420),
    (0.00000008666, 3.69933873164, 300.61086697750),
    (0.00000007685, 1.47377256329, 32.24332891440),
    (0.00000008195, 2.30769657654, 254.94359321360),
    (0.00000008473, 1.27680705911, 39.35687591520),
    (0.00000007026, 0.68091865104, 874.39401040250),
    (0.00000008898, 0.16273040357, 43.12897048390),
    (0.00000007205, 4.98177531040, 117.91056905120),
    (0.00000007389, 4.09295183164, 92.30770638560),
    (0.00000007314, 5.04313738379, 756.32338265690),
    (0.00000008454, 1.22026161161, 79.44746501330),
    (0.00000006925, 6.04100189247, 350.33211960040),
    (0.00000008793, 1.33398658801, 48.75804477640),
    (0.00000007270, 3.32609286227, 68.18931642830),
    (0.00000006825, 4.77832275072, 142.66209845490),
    (0.00000006816, 3.90452052962, 480.77286162380),
    (0.00000007062, 1.27536949417, 68.56182344380),
    (0.00000007947, 4.29940380231, 624.91943278700),
    (0.00000006741, 5.43264472273, 610.69233878540),
    (0.00000006529, 5.43599941795, 88.79624424780),
    (0.00000007635, 4.81180007736, 312.45971639350),
    (0.00000007235, 3.18370421558, 268.43697403230),
    (0.00000008133, 1.98936178361, 692.58748435350),
    (0.00000006477, 1.05238958778, 685.47393735270),
    (0.00000006630, 1.37656948077, 291.26208774300),
    (0.00000006878, 2.59188446778, 282.66406803390),
    (0.00000007123, 5.79744758808, 468.24268865160),
    (0.00000006320, 2.58497126634, 458.09076026500),
    (0.00000006222, 5.68982546821, 113.87784205160),
    (0.00000007635, 0.49482302003, 296.15744885260),
    (0.00000008521, 0.00576688485, 227.31374111850),
    (0.00000006520, 3.99093726386, 42.53826965290),
    (0.00000006435, 1.03721543102, 365.90067395840),
    (0.00000006107, 0.35071886662, 148.59998928810),
    (0.00000008199, 1.13448902886, 69.15252427480),
    (0.00000006102, 0.94101111641, 13.33332212430),
    (0.00000005989, 4.98445156102, 184.09414790940),
    (0.00000006355, 0.16346166674, 228.27694896500),
    (0.00000007955, 4.03567630186, 183.24281464750),
    (0.00000005884, 4.40842406038, 19.12245511120),
    (0.00000005938, 5.40863870407, 17.52610781830),
    (0.00000005869, 5.39494525133, 95.38852638680),
    (0.00000005775, 2.81250784939, 121.84272231430),
    (0.00000006070, 4.23605170027, 119.50691634410),
    (0.00000006349, 3.52304701692, 285.63301345050),
    (0.00000005780, 0.17831551537, 458.84151979040),
    (0.00000005674, 4.16711163603, 89.75945209430),
    (0.00000005534, 4.24741728108, 75.53235809270),
    (0.00000005648, 2.81224199321, 154.97982310600),
    (0.00000006939, 3.31979953743, 306.83064210100),
    (0.00000005682, 4.79764449768, 248.72381809010),
    (0.00000006087, 4.04640130992, 271.40591944890),
    (0.00000006869, 1.34392408836, 7.86430652620),
    (0.00000005611, 5.32955957046, 920.86443331850),
    (0.00000006495, 0.45735814276, 106.27416795630),
    (0.00000005353, 2.49825965802, 24.11838995730),
    (0.00000006612, 5.24626646696, 58.31927233200),
    (0.00000005552, 0.24515487696, 173.68158709190),
    (0.00000005209, 6.07866998675, 134.06407874580),
    (0.00000005176, 3.69984512887, 778.41478318470),
    (0.00000005949, 3.63204266272, 189.72322220190),
    (0.00000006360, 0.35370738262, 411.62033734900),
    (0.00000005147, 1.55440402971, 193.65537546500),
    (0.00000006436, 5.18759014405, 120.99138905240),
    (0.00000006994, 4.85978914075, 419.48464387520),
    (0.00000005323, 0.50787742639, 16.46232623530),
    (0.00000005085, 1.28917723765, 267.47376618580),
    (0.00000005993, 4.70505267412, 298.23262239190),
    (0.00000005507, 2.72405080404, 986.08480433020),
    (0.00000006163, 1.87793216012, 397.39324334740),
    (0.00000004846, 5.66714115710, 90.82323367730),
    (0.00000004875, 1.24385851949, 25.60286266560),
    (0.00000005374, 0.31175745933, 192.69216761850),
    (0.00000005262, 1.85699096844, 114.94162363460),
    (0.00000005373, 6.22242588334, 91.45637312370),
    (0.00000005050, 3.39322756907, 831.10498122420),
    (0.00000004637, 0.84958882655, 403.02231763990),
    (0.00000006382, 2.77560901069, 198.32124191100),
    (0.00000004685, 4.94029403928, 902.70518605380),
    (0.00000005005, 1.40309022449, 6.15033915430),
    (0.00000005014, 5.57665259095, 451.94042111070),
    (0.00000004580, 2.47734499363, 31.23193695810),
    (0.00000005129, 3.23528704150, 109.31254934210),
    (0.00000004459, 6.22635092697, 207.88246946660),
    (0.00000005734, 0.96616252776, 483.22054217860),
    (0.00000004425, 2.74721673213, 823.99143422340),
    (0.00000004575, 1.87994871749, 44.72531777680),
    (0.00000004748, 0.34902594832, 457.87831194390),
    (0.00000004268, 4.89983575247, 124.50285119020),
    (0.00000004709, 5.28612293112, 449.28029223480),
    (0.00000005761, 2.09247769051, 187.69623277240),
    (0.00000004284, 0.66132439268, 210.33015002140),
    (0.00000004318, 1.68857333749, 309.27832265580),
    (0.00000004332, 1.41872733238, 25.12978191360),
    (0.00000004305, 1.05990546337, 606.76018552230),
    (0.00000004519, 5.84384426255, 905.88657979150),
    (0.00000003934, 0.41768897300, 180.16199464630),
    (0.00000003973, 3.22666150606, 639.89728631400),
    (0.00000004871, 4.61331971606, 258.02441321480),
    (0.00000004604, 4.77631056831, 463.50738623640),
    (0.00000003943, 3.31312639875, 107.49800823370),
    (0.00000004217, 0.73383451512, 497.44763618020),
    (0.00000004057, 1.67333716577, 7.42236354150),
    (0.00000003854, 6.13547145503, 34.20088237470),
    (0.00000004617, 5.89829880253, 303.86169668440),
    (0.00000005086, 2.85235518740, 28.31117565130),
    (0.00000005337, 2.36556705745, 477.80391620720),
    (0.00000004456, 1.74674336635, 95.97922721780),
    (0.00000004138, 3.80344455465, 460.53844081980),
    (0.00000003812, 2.48508006441, 25.27279426550),
    (0.00000004732, 0.87519409311, 255.05546779820),
    (0.00000003843, 4.02615028031, 104.00779795530),
    (0.00000003776, 2.89171052095, 27.08733537390),
    (0.00000004932, 0.36238909407, 123.53964334370),
    (0.00000004371, 3.74322467592, 376.19561469690),
    (0.00000003747, 3.04126115463, 142.14083359310),
    (0.00000004232, 4.31629167726, 446.31134681820),
    (0.00000003685, 3.26448469664, 170.76082578510),
    (0.00000003575, 4.31199276037, 572.22923474750),
    (0.00000003567, 4.08542270507, 433.71173787680),
    (0.00000004496, 2.10358455875, 838.21852822500),
    (0.00000003505, 3.53902384390, 520.12973753900),
    (0.00000003524, 3.75716903766, 473.06861379200),
    (0.00000003962, 5.33706246667, 43.28902917830),
    (0.00000003597, 3.65066955203, 976.00231191280),
    (0.00000003487, 2.12239114397, 316.39186965660),
    (0.00000003475, 4.44351326599, 384.05992122310),
    (0.00000003628, 2.11511417759, 73.18525127440),
    (0.00000003702, 3.86923731076, 981.63138620530),
    (0.00000003687, 5.18698183343, 993.19835133100),
    (0.00000003599, 2.07986409347, 47.69426319340),
    (0.00000003807, 4.21821126511, 196.62432088160),
    (0.00000004707, 4.56309173897, 47.06112374700),
    (0.00000004312, 0.38740046308, 988.53248488500),
    (0.00000003867, 2.08559458308, 457.35704708210),
    (0.00000004723, 4.16947683948, 219.89137757700),
    (0.00000003527, 0.20371576470, 394.35486196160),
    (0.00000003644, 5.82023483708, 586.31331639720),
    (0.00000003328, 2.93840719007, 535.91074021810),
    (0.00000003321, 4.19289134366, 114.13847448250),
    (0.00000004128, 3.06165703109, 377.15882254340),
    (0.00000003545, 4.41886084391, 1293.87865427770),
    (0.00000003295, 2.97049569593, 15.19030184810),
    (0.00000003337, 6.23473900765, 9947.05568153210),
    (0.00000003253, 5.22412177835, 425.11371816770),
    (0.00000003677, 5.31389484415, 141.69889060840),
    (0.00000003242, 4.68868636498, 978.97125732940),
    (0.00000003266, 3.57072306171, 17.26547538740),
    (0.00000003435, 0.52794358986, 141.48644228730),
    (0.00000003242, 2.62760698007, 6.59228213900),
    (0.00000003613, 1.94737668557, 661.09491496450),
    (0.00000003182, 0.36603315110, 449.49274055590),
    (0.00000003311, 1.25616383318, 233.90602325750),
    (0.00000003403, 6.03792583170, 199.28444975750),
    (0.00000004196, 4.26442082589, 381.61224066830),
    (0.00000003961, 4.53281422377, 916.93228005540),
    (0.00000003846, 3.76849990033, 8.59801970910),
    (0.00000003350, 5.63661413371, 444.82687410990),
    (0.00000003780, 5.35722293289, 328.24071907260),
    (0.00000003166, 2.16351748263, 983.11585891360),
    (0.00000003538, 1.89746744103, 280.96714700450),
    (0.00000003930, 2.09444900058, 653.98136796370),
    (0.00000003282, 1.91872815218, 2349.32843120380),
    (0.00000003269, 0.52855777633, 450.45594840240),
    (0.00000003582, 1.60170266832, 1587.58842257550),
    (0.00000003522, 2.51782036180, 237.67811782620),
    (0.00000003024, 3.54567524563, 94.42531854030),
    (0.00000003528, 4.79818282081, 406.95447090300),
    (0.00000002996, 2.59155293620, 6133.51265285680),
    (0.00000003146, 2.18094827839, 216.92243216040),
    (0.00000003610, 6.15486273902, 171.65459766240),
    (0.00000002977, 0.69478628170, 294.30046912880),
    (0.00000003377, 1.21382647091, 162.89651925890),
    (0.00000003347, 4.14981703949, 214.78356814630),
    (0.00000002953, 2.18721777019, 597.35901666110),
    (0.00000004049, 3.15153850922, 833.55266177900),
    (0.00000003725, 5.84743216544, 6058.73105428950),
    (0.00000003390, 1.18412112871, 167.72244439930),
    (0.00000003142, 2.26934209337, 517.16079212240),
    (0.00000004077, 0.07273073033, 1190.03512053370),
    (0.00000003020, 2.64998251178, 20.44686912510),
    (0.00000003926, 1.41612569694, 346.18751801620),
    (0.00000003110, 1.11431255827, 1044.40407666220),
    (0.00000002836, 0.62522723719, 749.20983565610),
    (0.00000002831, 4.78996738581, 820.05928096030),
    (0.00000002824, 0.87232289414, 30.71067209630),
    (0.00000003114, 1.79734939525, 414.06801790380),
    (0.00000002801, 3.99301180541, 10063.72234907640),
    (0.00000003489, 1.86982946081, 371.52974825090),
    (0.00000003725, 1.68366366742, 683.98946464440),
    (0.00000003763, 3.28247771799, 432.81796599950),
    (0.00000003493, 0.98765698465, 9988.94075050910),
    (0.00000003523, 5.12512607932, 105.38039607900),
    (0.00000002839, 4.22662576295, 990.22940591440),
    (0.00000003432, 2.80483162230, 764.18768918310),
    (0.00000002733, 0.42373696972, 354.99798604640),
    (0.00000003146, 5.19208910201, 417.03696332040),
    (0.00000003041, 5.75641149588, 409.92341631960),
    (0.00000003379, 5.47448876584, 1396.22066897090),
    (0.00000003102, 0.41684444780, 521.09294538550),
    (0.00000002863, 0.41519700992, 894.84087952760),
    (0.00000002707, 3.60084311477, 621.73803904930),
    (0.00000003128, 5.23384180625, 424.15051032120),
    (0.00000003107, 2.44919355737, 4.66586644600),
    (0.00000002683, 3.88682711832, 133.10087089930),
    (0.00000002660, 4.78670985324, 362.86229257260),
    (0.00000003200, 1.88004939357, 331.20966448920),
    (0.00000002730, 4.12217979791, 600.54041039880),
    (0.00000003414, 4.93712749827, 1140.38330388000),
    (0.00000002653, 5.10283251074, 118.02244363580),
    (0.00000003222, 4.76521772319, 294.67297614430),
    (0.00000003289, 4.26401031509, 544.50875992720),
    (0.00000003100, 5.47928527930, 701.18550406260),
    (0.00000002785, 5.19343849039, 144.89733068860),
    (0.00000002607, 4.72531286187, 122.47586176070),
    (0.00000002581, 6.27329466695, 908.33426034630),
    (0.00000003285, 1.95972622670, 372.42352012820),
    (0.00000002897, 0.37378090180, 582.38116313410),
    (0.00000002615, 2.25516923974, 74.99404688840),
    (0.00000003582, 1.27992264402, 987.56927703850),
    (0.00000003115, 5.10929689813, 459.05396811150),
    (0.00000002857, 5.90256930211, 525.23754696970),
    (0.00000002589, 1.83177157032, 657.16276170140),
    (0.00000002539, 4.14968938109, 74.73341445750),
    (0.00000002797, 2.82242772664, 2036.86871481030),
    (0.00000002688, 2.16500211397, 262.80789973980),
    (0.00000002744, 1.54445470732, 28.57180808220),
    (0.00000002539, 0.46036497385, 74.82978267710),
    (0.00000003322, 3.50108539407, 82.64590509350),
    (0.00000002810, 6.06709915335, 374.49869366750),
    (0.00000002504, 3.52394801700, 1183.67233305830),
    (0.00000002565, 1.64023845161, 73.40900044360),
    (0.00000002531, 3.50486296784, 293.18850343600),
    (0.00000002663, 4.23321349902, 421.18156490460),
    (0.00000002793, 2.00644423849, 75.04223099820),
    (0.00000002430, 1.56119387576, 136.06981631590),
    (0.00000002553, 1.25909246207, 670.49608382570),
    (0.00000002604, 3.87350462519, 74.03083904190),
    (0.00000002510, 3.35948960782, 464.99185894470),
    (0.00000003005, 0.81031349171, 73.88782669000),
    (0.00000003110, 6.14956891318, 118.87377689770),
    (0.00000003234, 2.45751141361, 98.35747180340),
    (0.00000002774, 6.26134027482, 1022.31267613440),
    (0.00000002402, 4.38353347008, 1303.27982313890),
    (0.00000003296, 3.84350963765, 511.53171782990),
    (0.00000002800, 2.60339313269, 74.52096613640),
    (0.00000003005, 0.76247280223, 75.67537044460),
    (0.00000002434, 4.94784679430, 969.62247809490),
    (0.00000002632, 0.63557110200, 227.52618943960),
    (0.00000002669, 0.73340228210, 73.08467753790),
    (0.00000002465, 1.30648773380, 77.06922042770),
    (0.00000003237, 3.19110274211, 1887.30551767570),
    (0.00000002395, 2.76580569447, 768.85355562910),
    (0.00000003230, 0.01981320255, 881.50755740330),
    (0.00000002747, 5.59085990261, 388.72578766910),
    (0.00000003008, 5.65955463660, 1969.20066324380),
    (0.00000003008, 0.91409756228, 2118.76386037840),
    (0.00000002465, 0.26629856014, 72.49397670690),
    (0.00000002629, 4.00618677646, 26.02355379090),
    (0.00000002272, 2.77069357315, 515.46387109300),
    (0.00000002360, 4.12736987374, 74.62153987290),
    (0.00000002255, 3.36574443950, 286.59622129700),
    (0.00000002211, 5.18239546182, 59.28248017850),
    (0.00000002994, 2.83179016989, 184.98791978670),
    (0.00000002492, 1.19872353228, 383.09671337660),
    (0.00000002355, 0.48259604722, 74.94165726170),
    (0.00000002185, 6.07997119980, 63.62402371880),
    (0.00000002228, 1.42452148910, 6219.33995168800),
)

R2 = (
    (0.00022439904, 0.69953118760, 74.78159856730),
    (0.00004727037, 1.69901641488, 63.73589830340),
    (0.00001681903, 4.64833551727, 70.84944530420),
    (0.00001433755, 3.52119917947, 149.56319713460),
    (0.00001649559, 3.09660078980, 11.04570026390),
    (0.00000770188, 0.00000000000, 0.00000000000),
    (0.00000461009, 0.76676632849, 3.93215326310),
    (0.00000500429, 6.17229032223, 76.26607127560),
    (0.00000390371, 4.49605283502, 56.62235130260),
    (0.00000389945, 5.52673426377, 85.82729883120),
    (0.00000292097, 0.20389012095, 52.69019803950),
    (0.00000272898, 3.84707823651, 138.51749687070),
    (0.00000286579, 3.53357683270, 73.29712585900),
    (0.00000205449, 3.24758017121, 78.71375183040),
    (0.00000219674, 1.96418942891, 131.40394986990),
    (0.00000215788, 0.84812474187, 77.96299230500),
    (0.00000128834, 2.08146849515, 3.18139373770),
    (0.00000148554, 4.89840863841, 127.47179660680),
    (0.00000117452, 4.93414907433, 447.79581952650),
    (0.00000112690, 1.01361852218, 462.02291352810),
    (0.00000098875, 6.15817742611, 224.34479570190),
    (0.00000091379, 0.67973399531, 18.15924726470),
    (0.00000089217, 0.23425778826, 202.25339517410),
    (0.00000088206, 2.93094837724, 62.25142559510),
    (0.00000114066, 4.78741873960, 145.63104387150),
    (0.00000103858, 3.58561789629, 71.60020482960),
    (0.00000061819, 3.29964272893, 351.81659230870),
    (0.00000057782, 4.90737420887, 22.09140052780),
    (0.00000064369, 3.39006689398, 1.48447270830),
    (0.00000071110, 6.10490061068, 454.90936652730),
    (0.00000050990, 3.86691997779, 65.22037101170),
    (0.00000063537, 3.96202309168, 67.66805156650),
    (0.00000058957, 5.55530463687, 9.56122755560),
    (0.00000048700, 3.74709235789, 269.92144674060),
    (0.00000043584, 1.92568752002, 59.80374504030),
    (0.00000042170, 2.61650997054, 151.04766984290),
    (0.00000042420, 6.13634453301, 284.14854074220),
    (0.00000044340, 5.89997845114, 71.81265315070),
    (0.00000037328, 5.91300114911, 984.60033162190),
    (0.00000036201, 5.40315761474, 77.75054398390),
    (0.00000041989, 2.09071623849, 12.53017297220),
    (0.00000031411, 4.59200004835, 148.07872442630),
    (0.00000031289, 2.26696307388, 195.13984817330),
    (0.00000027150, 3.53242984046, 209.36694217490),
    (0.00000028152, 4.57845964163, 77.22927912210),
    (0.00000026097, 0.65978256272, 120.35824960600),
    (0.00000024372, 5.86680440531, 69.36497259590),
    (0.00000023037, 1.03776963677, 84.34282612290),
    (0.00000022679, 1.71434243970, 160.60889739850),
    (0.00000027650, 4.91488946525, 277.03499374140),
    (0.00000020816, 2.19643268155, 45.57665103870),
    (0.00000019961, 2.32077356180, 2.44768055480),
    (0.00000016584, 4.77529536873, 213.29909543800),
    (0.00000016578, 1.85615182154, 340.77089204480),
    (0.00000017196, 4.36852462522, 54.17467074780),
    (0.00000016053, 3.64619586667, 152.74459087230),
    (0.00000014806, 5.43824503068, 408.43894361130),
    (0.00000013872, 3.38531100784, 358.93013930950),
    (0.00000013328, 5.25179190495, 137.03302416240),
    (0.00000013286, 1.26285812368, 134.58534360760),
    (0.00000012890, 3.03270380745, 92.94084583200),
    (0.00000012467, 1.33213558369, 51.20572533120),
    (0.00000013450, 1.53176996919, 422.66603761290),
    (0.00000016442, 0.40190549188, 265.98929347750),
    (0.00000011996, 5.10426418352, 191.20769491020),
    (0.00000012898, 4.43242192513, 87.31177153950),
    (0.00000011449, 2.02645622099, 7.11354700080),
    (0.00000011826, 4.65645290272, 41.64449777560),
    (0.00000012045, 3.23910807852, 116.42609634290),
    (0.00000011680, 3.73278249629, 220.41264243880),
    (0.00000011573, 4.16500659139, 60.55450456570),
    (0.00000010175, 0.32936886913, 70.32818044240),
    (0.00000011332, 1.07613885149, 72.33391801250),
    (0.00000009655, 3.05950236129, 2.96894541660),
    (0.00000009279, 2.43997351068, 565.11568774670),
    (0.00000008986, 5.18839740735, 225.82926841020),
    (0.00000010284, 1.18602582060, 344.70304530790),
    (0.00000008844, 6.00894470528, 5.41662597140),
    (0.00000008508, 5.24741470216, 347.88443904560),
    (0.00000008319, 3.71723808749, 14.97785352700),
    (0.00000008276, 2.27408171672, 299.12639426920),
    (0.00000008064, 5.71681525179, 55.13787859430),
    (0.00000007830, 0.90313686798, 222.86032299360),
    (0.00000008335, 4.48600419464, 70.11573212130),
    (0.00000008763, 5.81519440120, 153.49535039770),
    (0.00000008472, 3.91387041805, 333.65734504400),
    (0.00000009874, 5.96526143660, 35.16409022120),
    (0.00000009647, 0.38872626737, 415.55249061210),
    (0.00000007106, 1.50598488470, 991.71387862270),
    (0.00000006596, 1.18068235818, 96.87299909510),
    (0.00000008065, 2.25930653257, 206.18554843720),
    (0.00000006479, 2.99461362786, 380.12776796000),
    (0.00000009012, 6.05343622530, 146.38180339690),
    (0.00000006131, 0.05596259493, 99.16062095550),
    (0.00000005799, 0.82465326137, 142.44965013380),
    (0.00000005816, 4.63029217647, 49.50880430180),
    (0.00000005608, 0.66268449799, 58.10682401090),
    (0.00000005966, 2.48916255408, 373.01422095920),
    (0.00000005710, 2.23566160404, 80.19822453870),
    (0.00000005272, 5.06746739956, 440.68227252570),
    (0.00000005162, 4.36457872885, 977.48678462110),
    (0.00000005428, 0.85181859845, 546.95644048200),
    (0.00000005766, 0.34229025692, 536.80451209540),
    (0.00000005924, 5.48443563529, 76.47851959670),
    (0.00000005340, 3.73073116400, 23.57587323610),
    (0.00000005174, 4.13873402677, 132.88842257820),
    (0.00000005310, 6.14059082194, 39.61750834610),
    (0.00000005790, 3.39593613152, 458.09076026500),
    (0.00000005007, 4.25821412289, 522.57741809380),
    (0.00000004967, 4.79184817938, 387.24131496080),
    (0.00000005183, 3.25775152471, 561.18353448360),
    (0.00000004602, 1.69262282455, 152.53214255120),
    (0.00000005302, 1.83522660093, 124.29040286910),
    (0.00000005005, 0.36630565950, 60.76695288680),
    (0.00000004454, 2.30288945184, 312.45971639350),
    (0.00000004457, 0.45775730382, 33.13710079170),
    (0.00000005722, 0.89523844278, 81.89514556810),
    (0.00000005842, 0.92039543147, 20.60692781950),
    (0.00000005743, 0.66226484448, 38.13303563780),
    (0.00000004255, 3.55373860346, 479.28838891550),
    (0.00000004190, 4.37674804409, 79.23501669220),
    (0.00000004194, 1.64986267170, 128.95626931510),
    (0.00000005125, 1.40553011416, 144.14657116320),
    (0.00000004045, 6.07362424798, 19.64371997300),
    (0.00000003984, 5.77178406410, 288.08069400530),
    (0.00000005017, 2.99521887648, 29.20494752860),
    (0.00000003842, 2.60024827897, 426.59819087600),
    (0.00000003861, 3.19886211335, 159.12442469020),
    (0.00000003870, 4.43713601497, 141.69889060840),
    (0.00000005316, 4.07970979457, 111.43016149680),
    (0.00000004553, 0.01384318412, 298.23262239190),
    (0.00000003737, 5.28319518103, 353.30106501700),
    (0.00000003939, 5.27301148162, 521.09294538550),
    (0.00000003710, 5.15385470848, 490.33408917940),
    (0.00000004039, 0.60924359087, 152.01087768940),
    (0.00000003861, 1.34394383700, 535.32003938710),
    (0.00000004385, 0.62057680100, 827.17282796110),
    (0.00000003567, 4.71986443303, 6.90109867970),
    (0.00000003576, 3.24526237368, 230.56457082540),
    (0.00000003469, 0.79054323335, 983.11585891360),
    (0.00000004524, 2.86819565712, 129.91947716160),
    (0.00000003648, 5.59395544992, 774.48262992160),
    (0.00000003513, 4.49630054276, 376.19561469690),
    (0.00000003432, 2.55614913808, 258.87574647670),
    (0.00000004352, 2.09804374929, 404.50679034820),
    (0.00000003336, 0.89628904042, 469.13646052890),
    (0.00000003274, 3.86236880159, 42.53826965290),
    (0.00000003201, 2.76459652868, 248.72381809010),
    (0.00000003184, 0.07709843451, 1514.29129671650),
    (0.00000003783, 5.29835962126, 369.08206769610),
    (0.00000003266, 2.24754480216, 73.81839072080),
    (0.00000003055, 2.60120354415, 433.71173787680),
    (0.00000003051, 4.54953369151, 980.66817835880),
    (0.00000003062, 1.27089879603, 200.76892246580),
    (0.00000003055, 1.70878161343, 639.89728631400),
    (0.00000003110, 3.63187411723, 16.67477455640),
    (0.00000003472, 4.93521260607, 411.62033734900),
    (0.00000003531, 4.49372794858, 881.50755740330),
    (0.00000003284, 5.59170577331, 472.17484191470),
    (0.00000003015, 6.02967446446, 291.26208774300),
    (0.00000003467, 2.17484439267, 554.06998748280),
    (0.00000003138, 0.52367930477, 1094.80665284130),
    (0.00000003257, 2.49339546514, 451.72797278960),
    (0.00000002881, 0.50481204892, 305.34616939270),
    (0.00000003082, 4.20145474081, 146.59425171800),
    (0.00000002883, 2.44983947531, 135.33610313300),
    (0.00000002965, 0.39294995530, 25.27279426550),
    (0.00000002831, 2.52728803131, 867.28046340170),
    (0.00000002728, 5.29491477549, 125.98732389850),
    (0.00000002857, 4.71106805785, 218.92816973050),
    (0.00000002763, 4.27510031656, 350.33211960040),
    (0.00000002730, 1.98552777251, 82.85835341460),
    (0.00000002857, 3.08706426922, 216.48048917570),
    (0.00000003365, 3.67691210011, 661.09491496450),
    (0.00000002925, 1.43646759644, 381.61224066830),
    (0.00000002753, 0.39468041761, 33.67961751290),
    (0.00000002756, 4.62672498840, 1357.61455258110),
    (0.00000003450, 2.12911756067, 685.47393735270),
    (0.00000002571, 5.92862393284, 89.75945209430),
    (0.00000002677, 0.76342313946, 486.40193591630),
    (0.00000002689, 4.16436463826, 235.39049596580),
    (0.00000002646, 3.81808560938, 550.88859374510),
    (0.00000003369, 3.17071565345, 108.46121608020),
    (0.00000002613, 5.68333838067, 24.37902238820),
    (0.00000002736, 1.87107584495, 529.69096509460),
    (0.00000002606, 4.36605237304, 1080.57955883970),
    (0.00000002407, 3.07343136742, 391.17346822390),
    (0.00000002446, 5.73846381540, 535.91074021810),
    (0.00000002334, 5.18878243102, 1059.38193018920),
    (0.00000002568, 1.09886876369, 913.00012679230),
    (0.00000002236, 6.10115874045, 140.00196957900),
    (0.00000003053, 5.35047433775, 681.54178408960),
)

R3 = (
    (0.00001164382, 4.73453291602, 74.78159856730),
    (0.00000212367, 3.34255734999, 63.73589830340),
    (0.00000196408, 2.98004616318, 70.84944530420),
    (0.00000104527, 0.95807937648, 11.04570026390),
    (0.00000071681, 0.02528455665, 56.62235130260),
    (0.00000072540, 0.99701907912, 149.56319713460),
    (0.00000054875, 2.59436811267, 3.93215326310),
    (0.00000034029, 3.81553325635, 76.26607127560),
    (0.00000032081, 3.59825177840, 131.40394986990),
    (0.00000029641, 3.44111535957, 85.82729883120),
    (0.00000036377, 5.65035573017, 77.96299230500),
    (0.00000027663, 0.42836001470, 3.18139373770),
    (0.00000027464, 2.55126467481, 52.69019803950),
    (0.00000024569, 5.14034173566, 78.71375183040),
    (0.00000019390, 5.13477648625, 18.15924726470),
    (0.00000015767, 0.37116951743, 447.79581952650),
    (0.00000015441, 5.57271837433, 462.02291352810),
    (0.00000015232, 3.85998573509, 73.29712585900),
    (0.00000015475, 2.97496547327, 145.63104387150),
    (0.00000017951, 0.00000000000, 0.00000000000),
    (0.00000015958, 5.19915553904, 71.60020482960),
    (0.00000011056, 6.03152659562, 138.51749687070),
    (0.00000010529, 3.58261852497, 224.34479570190),
    (0.00000007606, 1.44542030704, 1.48447270830),
    (0.00000008121, 2.61579604319, 22.09140052780),
    (0.00000007107, 5.43946774526, 269.92144674060),
    (0.00000006459, 4.37142319461, 284.14854074220),
    (0.00000006818, 0.01396812984, 151.04766984290),
    (0.00000008101, 0.29563819537, 127.47179660680),
    (0.00000005768, 4.22672716593, 373.01422095920),
    (0.00000005022, 1.84154937974, 202.25339517410),
    (0.00000004692, 2.78404575440, 120.35824960600),
    (0.00000005087, 0.77745294804, 62.25142559510),
    (0.00000004160, 1.83820502779, 72.33391801250),
    (0.00000003922, 1.88900691473, 209.36694217490),
    (0.00000005201, 4.15791319343, 195.13984817330),
    (0.00000003636, 1.99709010456, 65.22037101170),
    (0.00000003582, 3.92592140377, 124.29040286910),
    (0.00000003808, 1.04818660873, 92.94084583200),
    (0.00000004241, 3.95755998904, 9.56122755560),
    (0.00000003497, 1.54139696251, 148.07872442630),
    (0.00000003195, 2.98608971329, 387.24131496080),
    (0.00000003950, 1.85721204932, 152.74459087230),
    (0.00000003277, 1.40881404192, 351.81659230870),
    (0.00000003605, 1.17366167402, 153.49535039770),
    (0.00000002940, 6.03594958459, 12.53017297220),
    (0.00000002744, 5.64674283515, 134.58534360760),
    (0.00000002800, 0.79480255927, 572.22923474750),
    (0.00000003054, 5.84310939105, 160.60889739850),
    (0.00000002662, 1.98593312104, 450.97721326420),
    (0.00000002700, 2.77036653988, 213.29909543800),
    (0.00000002323, 1.67918985468, 358.93013930950),
    (0.00000002254, 5.77129530133, 84.34282612290),
    (0.00000002291, 4.81424601600, 536.80451209540),
    (0.00000002213, 2.20360299816, 465.95506679120),
)
# fmt: on

L = (L0, L1, L2, L3, L4, L5)
B = (B0, B1, B2, B3, B4)
R = (R0, R1, R2, R3)
